"""
Сравнение ввода ученика с эталонным предложением v1.2.

Поток данных (без состояния между вызовами):
  строки → нормализация → сопоставление слов → побуквенное
  выравнивание ошибок → сборка результата

Функция чистая: её можно вызывать одновременно из разных потоков.
Отсрочку (debounce) ввода и отбрасывание устаревших результатов
делает вызывающий код.

v1.2 (2026-10-15): suppress_auto_advance вместо глобального таймера смены сегмента
v1.1 (2026-10-10): Конфигурация словарём (camelCase / snake_case)
v1.0 (2026-10-06): Начальная версия
"""

from dataclasses import replace
from typing import Any, Dict, List, Union

from .char_aligner import align_characters
from .config import ComparisonConfig, DEFAULT_CONFIG, get_logger
from .normalizer import normalize_word
from .result import ComparisonResult, Word, STATUS_MISSPELLED, assemble
from .similarity import text_similarity
from .word_aligner import align

VERSION = '1.2.0'

logger = get_logger(__name__)

ConfigLike = Union[ComparisonConfig, Dict[str, Any], None]


def _as_text(value) -> str:
    if value is None:
        return ''
    if not isinstance(value, str):
        return str(value)
    return value


def tokenize(text) -> List[Word]:
    """
    Слова текста с позициями.

    Разбиение по пробелам; токены, от которых после нормализации
    ничего не осталось ("—", "!!"), отбрасываются.
    """
    words = []
    for token in _as_text(text).split():
        if normalize_word(token):
            words.append(Word(text=token, position=len(words)))
    return words


def resolve_config(config: ConfigLike) -> ComparisonConfig:
    """ComparisonConfig как есть, словарь — через from_dict, None — по умолчанию."""
    if config is None:
        return DEFAULT_CONFIG
    if isinstance(config, ComparisonConfig):
        return config
    return ComparisonConfig.from_dict(config)


def compare(
    reference_text,
    input_text,
    config: ConfigLike = None,
    *,
    suppress_auto_advance: bool = False,
) -> ComparisonResult:
    """
    Сравнивает ввод ученика с эталоном.

    Args:
        reference_text: Эталонное предложение
        input_text: Что набрал ученик
        config: ComparisonConfig или словарь опций
        suppress_auto_advance: Запретить автопереход (например, сегмент только что сменился)

    Returns:
        ComparisonResult — новый объект на каждый вызов

    Raises:
        ValueError: Только при невалидной конфигурации

    Пример:
        >>> result = compare('Es gibt viel zu tun', 'zu gibt Es tun')
        >>> result.stats.missing
        1
    """
    config = resolve_config(config)
    reference = _as_text(reference_text)
    typed = _as_text(input_text)

    reference_words = tokenize(reference)
    input_words = tokenize(typed)

    outcome = align(reference_words, input_words, config)

    words = []
    for match in outcome.words:
        if match.status == STATUS_MISSPELLED:
            alignment = align_characters(match.actual.text, match.expected.text)
            match = replace(match, alignment=alignment)
        words.append(match)

    result = assemble(
        words,
        outcome.extra_words,
        input_text=typed,
        reference_text=reference,
        text_similarity=text_similarity(reference, typed),
        suppress_auto_advance=suppress_auto_advance,
    )

    logger.debug(
        f"compare: верно {result.stats.correct}, ошибки {result.stats.misspelled}, "
        f"пропуски {result.stats.missing}, лишние {result.stats.extra}"
    )
    return result
