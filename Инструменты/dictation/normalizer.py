"""
Нормализация немецкого текста для сравнения диктантов v1.4.

Содержит:
- normalize — каноническая форма строки (умлауты, эсцет, пунктуация, регистр)
- normalize_word — кэшированная нормализация одного слова
- transform_with_positions — та же нормализация + карта позиций символов

Порядок шагов фиксирован:
  0. Комбинируемые диакритики → составные буквы (NFC)
  1. ae / aE / a: / a/ → ä (o → ö, u → ü; заглавные → Ä Ö Ü: "OE" → "Ö")
  2. s: / s/ / S: → ß; заглавная B между строчной и буквой → ß; словарь исключений
  3. Удаление всего, кроме букв, цифр и пробелов; схлопывание пробелов
  4. Нижний регистр (если не preserve_case)

Шаги повторяются до стабилизации: normalize(normalize(x)) == normalize(x).

v1.4 (2026-10-18): Маркеры в верхнем регистре ("SCHOENER" → "SCHÖNER", "S:" → ß)
v1.3 (2026-10-14): Карта позиций строится для всех шагов (transform_with_positions)
v1.2 (2026-10-11): Повтор конвейера до неподвижной точки
v1.1 (2026-10-08): Словарь исключений для эсцета (FuB, eBay)
v1.0 (2026-10-05): Начальная версия
"""

import re
import unicodedata
from functools import lru_cache
from typing import Callable, Dict, List, Optional, Tuple, Union

from .config import get_logger
from .constants import (
    UMLAUT_NOTATIONS, UMLAUT_MARKERS,
    SHARP_S, SHARP_S_MARKERS, SHARP_S_FINAL_STEMS, SHARP_S_KEEP_WORDS,
)

VERSION = '1.4.0'

logger = get_logger(__name__)

# Карта позиций: индекс символа до шага → индекс после шага (None = символ исчез)
PositionMap = List[Optional[int]]


# =============================================================================
# РЕГУЛЯРНЫЕ ВЫРАЖЕНИЯ
# =============================================================================

COMBINING_PATTERN = re.compile(r'.[\u0300-\u036f]+', re.DOTALL)
UMLAUT_PATTERN = re.compile(
    f"([{''.join(UMLAUT_NOTATIONS)}])([{re.escape(UMLAUT_MARKERS)}])"
)
SHARP_S_NOTATION_PATTERN = re.compile(f"[sS][{re.escape(SHARP_S_MARKERS)}]")
CAPITAL_B_PATTERN = re.compile(r'B')
NON_WORD_PATTERN = re.compile(r'[^\w\s]|_')
WHITESPACE_PATTERN = re.compile(r'\s+')
EDGE_SPACE_PATTERN = re.compile(r'^ | $')
ANY_CHAR_PATTERN = re.compile(r'.', re.DOTALL)

_WORD_TAIL = re.compile(r'\w*$')
_WORD_HEAD = re.compile(r'\w*')


# =============================================================================
# ПЕРЕЗАПИСЬ С ОТСЛЕЖИВАНИЕМ ПОЗИЦИЙ
# =============================================================================

def _rewrite(
    text: str,
    pattern: re.Pattern,
    repl: Union[str, Callable[[re.Match], str]],
) -> Tuple[str, PositionMap]:
    """
    re.sub, который запоминает, куда попал каждый символ.

    Символы вне совпадений сдвигаются. В совпадении первый символ
    указывает на начало замены, остальные — на None
    ("ae" → "ä": a → ä, e → None). Пустая замена → все None.
    """
    parts: List[str] = []
    step: PositionMap = [None] * len(text)
    out_len = 0
    last = 0

    for match in pattern.finditer(text):
        start, end = match.span()
        for i in range(last, start):
            step[i] = out_len + (i - last)
        parts.append(text[last:start])
        out_len += start - last

        replacement = repl(match) if callable(repl) else repl
        if replacement and end > start:
            step[start] = out_len
        parts.append(replacement)
        out_len += len(replacement)
        last = end

    for i in range(last, len(text)):
        step[i] = out_len + (i - last)
    parts.append(text[last:])

    return ''.join(parts), step


def _compose(origin: PositionMap, step: PositionMap) -> PositionMap:
    """Склеивает карту «оригинал → текущий текст» с картой очередного шага."""
    return [step[pos] if pos is not None else None for pos in origin]


# =============================================================================
# ШАГИ КОНВЕЙЕРА
# =============================================================================

def _compose_diacritics(match: re.Match) -> str:
    return unicodedata.normalize('NFC', match.group())


def _expand_umlaut(match: re.Match) -> str:
    return UMLAUT_NOTATIONS[match.group(1)]


def _sharp_s_from_b(match: re.Match) -> str:
    """
    Заглавная B, набранная вместо ß ("StraBe", "FuB").

    Внутри слова — после строчной и перед буквой. На конце слова —
    только для основ из SHARP_S_FINAL_STEMS.
    """
    text = match.string
    pos = match.start()
    head = _WORD_TAIL.search(text, 0, pos).group()
    tail = _WORD_HEAD.match(text, pos + 1).group()

    if f"{head}B{tail}" in SHARP_S_KEEP_WORDS:
        return 'B'
    if not head or not head[-1].isalpha() or not head[-1].islower():
        return 'B'
    if tail and tail[0].isalpha():
        return SHARP_S
    if not tail and head.lower() in SHARP_S_FINAL_STEMS:
        return SHARP_S
    return 'B'


def _lowercase(match: re.Match) -> str:
    return match.group().lower()


def _single_pass(text: str, preserve_case: bool) -> Tuple[str, PositionMap]:
    """Один проход конвейера. Возвращает текст и карту позиций прохода."""
    origin: PositionMap = list(range(len(text)))

    steps = [
        (COMBINING_PATTERN, _compose_diacritics),
        (UMLAUT_PATTERN, _expand_umlaut),
        (SHARP_S_NOTATION_PATTERN, SHARP_S),
        (CAPITAL_B_PATTERN, _sharp_s_from_b),
        (NON_WORD_PATTERN, ''),
        (WHITESPACE_PATTERN, ' '),
        (EDGE_SPACE_PATTERN, ''),
    ]
    if not preserve_case:
        steps.append((ANY_CHAR_PATTERN, _lowercase))

    for pattern, repl in steps:
        text, step = _rewrite(text, pattern, repl)
        origin = _compose(origin, step)

    return text, origin


def _run_pipeline(text: str, preserve_case: bool) -> Tuple[str, PositionMap]:
    """Проходы до неподвижной точки. Каждый проход только сокращает или приводит регистр."""
    origin: PositionMap = list(range(len(text)))
    current = text

    for _ in range(len(text) + 2):
        result, step = _single_pass(current, preserve_case)
        origin = _compose(origin, step)
        if result == current:
            break
        current = result

    return current, origin


def _coerce(text) -> str:
    if text is None:
        return ''
    if not isinstance(text, str):
        return str(text)
    return text


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================

def transform_with_positions(
    text,
    preserve_case: bool = False,
) -> Tuple[str, Dict[int, Optional[int]]]:
    """
    Нормализует текст и возвращает карту позиций.

    Args:
        text: Исходная строка (None → '')
        preserve_case: Сохранить регистр (только для отображения)

    Returns:
        (нормализованный текст, {индекс исходного символа: индекс в результате или None})

    Пример:
        >>> transform_with_positions('Baer')
        ('bär', {0: 0, 1: 1, 2: None, 3: 2})
    """
    source = ''
    try:
        source = _coerce(text)
        result, origin = _run_pipeline(source, preserve_case)
    except Exception as e:
        logger.warning(f"Ошибка нормализации {source!r}: {e}")
        return source, {i: i for i in range(len(source))}

    return result, dict(enumerate(origin))


def normalize(text, preserve_case: bool = False) -> str:
    """
    Каноническая форма текста для сравнения.

    Никогда не бросает исключений: при сбое возвращается исходная строка.

    Примеры:
        >>> normalize('Schoener Tag!')
        'schöner tag'
        >>> normalize('StraBe', preserve_case=True)
        'Straße'
    """
    result, _ = transform_with_positions(text, preserve_case)
    return result


@lru_cache(maxsize=50000)
def _normalize_word_cached(word: str) -> str:
    return normalize(word)


def normalize_word(word) -> str:
    """Нормализация одного слова (нижний регистр, кэш)."""
    return _normalize_word_cached(_coerce(word))
