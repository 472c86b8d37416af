"""
Оценка схожести слов v1.5.

Содержит:
- score — схожесть ожидаемого и набранного слова (0..1)
- levenshtein_distance — обычное расстояние Левенштейна (rapidfuzz)
- keyboard_levenshtein — расстояние с дешёвой заменой соседних клавиш
- detect_typo_patterns — бонус за типичные немецкие опечатки
- length_adjusted_threshold — порог, смягчённый для длинных слов
- text_similarity — схожесть предложений целиком

Правила score, по порядку:
  1. Совпадение с учётом регистра → 1.0
  2. Совпадение ключей normalize() (нижний регистр) → 0.95
  3. Подстрока (сокращённое составное слово) → 0.5 + 0.45 * доля длины
  4. 1 - d / max(len), d — расстояние с учётом клавиатуры
  5. + бонус за опечатку (не более 0.15)
Результат правил 3-5 не выше 0.99. Оценка не выше порога → 0.

v1.5 (2026-10-18): Правило 2 сравнивает ключи normalize(), а не display.lower()
v1.4 (2026-10-15): text_similarity через rapidfuzz.fuzz.ratio
v1.3 (2026-10-12): Порог по длине слова
v1.2 (2026-10-09): Бонус за опечатки (sch→sh, умлауты, ß, двойные гласные)
v1.1 (2026-10-07): Клавиатурная стоимость замены
v1.0 (2026-10-05): Начальная версия
"""

from functools import lru_cache
from typing import Optional

from rapidfuzz import fuzz
from rapidfuzz.distance import Levenshtein

from .config import ComparisonConfig, DEFAULT_CONFIG
from .constants import (
    EXACT_SCORE, CASE_INSENSITIVE_SCORE, MAX_FUZZY_SCORE,
    SUBSTRING_MIN_RATIO, SUBSTRING_MIN_SCORE, SUBSTRING_BASE, SUBSTRING_WEIGHT,
    LENGTH_THRESHOLD_START, LENGTH_THRESHOLD_STEP,
    LENGTH_THRESHOLD_MIN_FACTOR, LENGTH_THRESHOLD_FLOOR,
    MAX_TYPO_BONUS, CLUSTER_BONUS, UMLAUT_BONUS, SHARP_S_BONUS, DOUBLE_VOWEL_BONUS,
    CLUSTER_SIMPLIFICATIONS, UMLAUT_BASE_VOWELS, UMLAUT_POSITION_TOLERANCE,
    DOUBLE_VOWELS, SHARP_S, AUTO_LAYOUT,
)
from .keyboard import keyboard_proximity_cost
from .normalizer import normalize

VERSION = '1.5.0'


# =============================================================================
# РАССТОЯНИЕ ЛЕВЕНШТЕЙНА
# =============================================================================

@lru_cache(maxsize=50000)
def levenshtein_distance(s1: str, s2: str) -> int:
    """Расстояние Левенштейна (rapidfuzz)."""
    return Levenshtein.distance(s1, s2)


@lru_cache(maxsize=50000)
def keyboard_levenshtein(s1: str, s2: str, layout: str = AUTO_LAYOUT) -> float:
    """
    Расстояние Левенштейна, где замена соседней клавиши стоит 0.8.

    Вставка и удаление стоят 1.0, как обычно.
    """
    if not s1:
        return float(len(s2))
    if not s2:
        return float(len(s1))

    previous = [float(j) for j in range(len(s2) + 1)]
    for i, c1 in enumerate(s1, 1):
        current = [float(i)] + [0.0] * len(s2)
        for j, c2 in enumerate(s2, 1):
            if c1 == c2:
                substitution = previous[j - 1]
            else:
                substitution = previous[j - 1] + keyboard_proximity_cost(c1, c2, layout)
            current[j] = min(
                previous[j] + 1.0,       # удаление
                current[j - 1] + 1.0,    # вставка
                substitution,
            )
        previous = current

    return previous[-1]


# =============================================================================
# ПОРОГИ И БОНУСЫ
# =============================================================================

def length_adjusted_threshold(length: int, base: float = 0.3, enabled: bool = True) -> float:
    """
    Минимальный порог схожести для слова длины length.

    До 10 символов — base. Дальше -5% за символ, но не меньше половины base
    и не меньше 0.2 (если сам base не ниже 0.2).

    Примеры:
        >>> length_adjusted_threshold(8)
        0.3
        >>> round(length_adjusted_threshold(14), 3)
        0.24
    """
    if not enabled or length <= LENGTH_THRESHOLD_START:
        return base

    factor = max(
        LENGTH_THRESHOLD_MIN_FACTOR,
        1.0 - LENGTH_THRESHOLD_STEP * (length - LENGTH_THRESHOLD_START),
    )
    return max(base * factor, min(base, LENGTH_THRESHOLD_FLOOR))


def _has_umlaut_typed_as_base(actual: str, expected: str) -> bool:
    for umlaut, base in UMLAUT_BASE_VOWELS.items():
        umlaut_index = expected.find(umlaut)
        if umlaut_index < 0:
            continue
        base_index = actual.find(base)
        if base_index >= 0 and abs(umlaut_index - base_index) <= UMLAUT_POSITION_TOLERANCE:
            return True
    return False


def detect_typo_patterns(actual: str, expected: str) -> float:
    """
    Бонус за типичную немецкую опечатку.

    Args:
        actual: Набранное слово
        expected: Правильное слово

    Returns:
        Наибольший бонус из найденных паттернов (0..0.15)

    Паттерны:
        - упрощение кластера: sch → sh, ck → k, tz → z
        - гласная без умлаута рядом с позицией умлаута: Tür → Tur
        - ß набрано как s / ss: Straße → Strasse
        - двойная гласная набрана одинарной: Meer → Mer
    """
    actual = actual.lower()
    expected = expected.lower()
    bonus = 0.0

    for full, short in CLUSTER_SIMPLIFICATIONS:
        if full in expected and short in actual and full not in actual:
            bonus = max(bonus, CLUSTER_BONUS)

    if _has_umlaut_typed_as_base(actual, expected):
        bonus = max(bonus, UMLAUT_BONUS)

    if SHARP_S in expected and SHARP_S not in actual and 's' in actual:
        bonus = max(bonus, SHARP_S_BONUS)

    for double in DOUBLE_VOWELS:
        if double in expected and double not in actual:
            bonus = max(bonus, DOUBLE_VOWEL_BONUS)

    return min(bonus, MAX_TYPO_BONUS)


# =============================================================================
# ОЦЕНКА СХОЖЕСТИ
# =============================================================================

def _substring_score(expected: str, actual: str) -> float:
    if not (expected in actual or actual in expected):
        return 0.0

    ratio = min(len(expected), len(actual)) / max(len(expected), len(actual))
    if ratio < SUBSTRING_MIN_RATIO:
        return 0.0

    scaled = SUBSTRING_BASE + SUBSTRING_WEIGHT * ratio
    return scaled if scaled >= SUBSTRING_MIN_SCORE else 0.0


def _fuzzy_score(expected: str, actual: str, config: ComparisonConfig) -> float:
    substring = _substring_score(expected, actual)
    if substring:
        return min(substring, MAX_FUZZY_SCORE)

    if config.use_keyboard_proximity:
        distance = keyboard_levenshtein(expected, actual, config.keyboard_layout)
    else:
        distance = levenshtein_distance(expected, actual)
    similarity = 1.0 - distance / max(len(expected), len(actual))

    if config.use_typo_pattern_bonus:
        similarity += detect_typo_patterns(actual, expected)

    return min(max(similarity, 0.0), MAX_FUZZY_SCORE)


def score(expected, actual, config: Optional[ComparisonConfig] = None) -> float:
    """
    Схожесть ожидаемого и набранного слова.

    Args:
        expected: Слово из эталона
        actual: Слово, набранное учеником
        config: Настройки (None → по умолчанию)

    Returns:
        Оценка 0..1 (1.0 точное совпадение, 0.95 отличие только в регистре)

    Примеры:
        >>> score('Haus', 'Haus')
        1.0
        >>> score('Haus', 'haus')
        0.95
        >>> score('Katze', 'Hund')
        0.0
    """
    config = config or DEFAULT_CONFIG

    expected_key = normalize(expected)
    actual_key = normalize(actual)
    if not expected_key or not actual_key:
        return 0.0

    if normalize(expected, preserve_case=True) == normalize(actual, preserve_case=True):
        return EXACT_SCORE

    # Те же ключи, что у Word.key: пара из прохода точных совпадений получает 0.95
    if expected_key == actual_key:
        return CASE_INSENSITIVE_SCORE

    result = _fuzzy_score(expected_key, actual_key, config)

    threshold = length_adjusted_threshold(
        len(expected_key),
        config.minimum_match_threshold,
        config.use_length_based_thresholds,
    )
    if result <= threshold:
        return 0.0
    return result


def text_similarity(reference_text, input_text) -> float:
    """
    Схожесть предложений целиком (0..1), rapidfuzz.fuzz.ratio по нормализованному тексту.

    Оба пустые → 1.0, один пустой → 0.0.
    """
    reference = normalize(reference_text)
    typed = normalize(input_text)
    if not reference and not typed:
        return 1.0
    if not reference or not typed:
        return 0.0
    return fuzz.ratio(reference, typed) / 100.0
