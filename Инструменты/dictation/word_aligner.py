"""
Сопоставление слов эталона со словами ввода v1.2.

Каждое слово ввода используется не более одного раза. Порядок слов
во вводе не важен: "zu gibt Es tun" находит все четыре слова.

Проходы:
  1. Резерв точных совпадений — каждое слово эталона по порядку забирает
     первое слово ввода с тем же ключом. Нечёткий кандидат не может
     «украсть» чужое точное совпадение (Sonne ↔ scheint = 0.31).
  2. Жадный проход — оставшиеся слова эталона по порядку выбирают
     лучшего кандидата из пула (при равенстве — первого по порядку ввода).
  3. Остаток пула — лишние слова в порядке ввода.

v1.2 (2026-10-13): Резерв точных совпадений перед жадным проходом
v1.1 (2026-10-09): Порог по длине слова, учёт регистра
v1.0 (2026-10-06): Начальная версия
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .config import ComparisonConfig, DEFAULT_CONFIG, get_logger
from .constants import CORRECT_SCORE
from .result import (
    Word, WordMatch,
    STATUS_CORRECT, STATUS_MISSPELLED, STATUS_MISSING, STATUS_EXTRA,
)
from .similarity import length_adjusted_threshold, score

VERSION = '1.2.0'

logger = get_logger(__name__)


@dataclass(frozen=True)
class AlignmentOutcome:
    """Итог сопоставления: по одному WordMatch на слово эталона + лишние"""
    words: Tuple[WordMatch, ...]
    extra_words: Tuple[WordMatch, ...]


def _status(expected: Word, actual: Word, similarity: float, config: ComparisonConfig) -> str:
    if similarity < CORRECT_SCORE:
        return STATUS_MISSPELLED
    if config.case_sensitive and expected.display != actual.display:
        return STATUS_MISSPELLED
    return STATUS_CORRECT


def _reserve_exact(
    reference_words: Sequence[Word],
    pool: List[Word],
    matches: Dict[int, WordMatch],
    key: Callable[[Word], str],
    config: ComparisonConfig,
) -> None:
    """Резервирует точные совпадения по ключу key. Изменяет pool и matches."""
    for index, expected in enumerate(reference_words):
        if index in matches:
            continue
        expected_key = key(expected)
        if not expected_key:
            continue
        for candidate in pool:
            if key(candidate) == expected_key:
                similarity = score(expected.text, candidate.text, config)
                matches[index] = WordMatch(
                    expected=expected,
                    actual=candidate,
                    status=_status(expected, candidate, similarity, config),
                    similarity=similarity,
                )
                pool.remove(candidate)
                break


def _best_candidate(
    expected: Word,
    pool: Sequence[Word],
    config: ComparisonConfig,
) -> Tuple[Optional[Word], float]:
    """Лучший кандидат из пула. Строгое '>' — при равенстве остаётся первый."""
    best: Optional[Word] = None
    best_score = 0.0
    for candidate in pool:
        similarity = score(expected.text, candidate.text, config)
        if similarity > best_score:
            best, best_score = candidate, similarity
    return best, best_score


def align(
    reference_words: Sequence[Word],
    input_words: Sequence[Word],
    config: Optional[ComparisonConfig] = None,
) -> AlignmentOutcome:
    """
    Сопоставляет слова эталона и ввода один к одному.

    Args:
        reference_words: Слова эталона (порядок важен для жадного выбора)
        input_words: Слова ввода в порядке набора
        config: Настройки (None → по умолчанию)

    Returns:
        AlignmentOutcome(words, extra_words)

    Граничные случаи:
        - пустой ввод → все слова эталона missing
        - пустой эталон → ничего (и лишних нет)
    """
    config = config or DEFAULT_CONFIG
    if not reference_words:
        return AlignmentOutcome(words=(), extra_words=())

    pool: List[Word] = list(input_words)
    matches: Dict[int, WordMatch] = {}

    # Проход 1: точные совпадения (в режиме с регистром сначала по точному регистру)
    if config.case_sensitive:
        _reserve_exact(reference_words, pool, matches, lambda w: w.display, config)
    _reserve_exact(reference_words, pool, matches, lambda w: w.key, config)

    # Проход 2: жадный выбор лучшего кандидата
    for index, expected in enumerate(reference_words):
        if index in matches:
            continue

        candidate, similarity = _best_candidate(expected, pool, config)
        threshold = length_adjusted_threshold(
            len(expected.key),
            config.minimum_match_threshold,
            config.use_length_based_thresholds,
        )

        if candidate is not None and similarity > threshold:
            matches[index] = WordMatch(
                expected=expected,
                actual=candidate,
                status=_status(expected, candidate, similarity, config),
                similarity=similarity,
            )
            pool.remove(candidate)
        else:
            matches[index] = WordMatch(
                expected=expected,
                actual=None,
                status=STATUS_MISSING,
                similarity=0.0,
            )

    # Проход 3: остаток пула становится лишними словами
    extra_words = tuple(
        WordMatch(expected=None, actual=word, status=STATUS_EXTRA)
        for word in pool
    )
    words = tuple(matches[index] for index in range(len(reference_words)))

    logger.debug(
        f"Сопоставлено: {sum(1 for m in words if m.actual is not None)}/{len(words)}, "
        f"лишних: {len(extra_words)}"
    )
    return AlignmentOutcome(words=words, extra_words=extra_words)
