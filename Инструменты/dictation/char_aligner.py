"""
Побуквенное выравнивание слова с ошибкой v1.2.

Для пары «набранное слово ↔ эталон» строит карты индексов:
  исходный символ ввода → символ нормализованного ввода → символ эталона

Сами буквы эталона не хранятся: по выравниванию видно, ГДЕ пропущена
буква, но не КАКАЯ. Ученик не должен получить подсказку с ответом.

Алгоритм: полная матрица расстояния Левенштейна (единичные стоимости),
обратный проход от (len(ввод), len(эталон)) к (0, 0).
При равенстве: диагональ → лишняя буква ввода → пропуск буквы эталона.

v1.2 (2026-10-14): input_states() — состояние каждого набранного символа
v1.1 (2026-10-10): Начальный кластер sch, набранный как sh (missing_between)
v1.0 (2026-10-06): Начальная версия
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Tuple

from .config import get_logger
from .constants import LEADING_CLUSTERS
from .normalizer import normalize, transform_with_positions

VERSION = '1.2.0'

logger = get_logger(__name__)

# Состояния набранных символов
CHAR_CORRECT = 'correct'
CHAR_MISSPELLED = 'misspelled'
CHAR_EXTRA = 'extra'
CHAR_IGNORED = 'ignored'    # вторая половина "ae", пунктуация


@dataclass(frozen=True)
class CharacterAlignment:
    """
    Выравнивание символов одного слова.

    input_to_transformed: индекс нажатия → индекс в нормализованном вводе (или None)
    transformed_to_reference: индекс в нормализованном вводе → индекс в эталоне
    missing_between: индекс в нормализованном вводе → сколько букв эталона пропущено перед ним
    correct_positions: индексы нормализованного ввода, где буква совпала с эталоном
    """
    input_to_transformed: Dict[int, Optional[int]] = field(default_factory=dict)
    transformed_to_reference: Dict[int, int] = field(default_factory=dict)
    missing_between: Dict[int, int] = field(default_factory=dict)
    correct_positions: FrozenSet[int] = frozenset()
    transformed_length: int = 0
    reference_length: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.transformed_to_reference and not self.input_to_transformed

    @property
    def reference_matched(self) -> FrozenSet[int]:
        """Позиции эталона, которым нашлась пара во вводе."""
        return frozenset(self.transformed_to_reference.values())

    @property
    def missing_reference_positions(self) -> List[int]:
        """Позиции пропущенных букв эталона (только позиции, без букв)."""
        matched = self.reference_matched
        return [j for j in range(self.reference_length) if j not in matched]

    @property
    def extra_transformed_positions(self) -> List[int]:
        """Позиции лишних букв нормализованного ввода."""
        return [
            i for i in range(self.transformed_length)
            if i not in self.transformed_to_reference
        ]

    def input_states(self) -> List[str]:
        """Состояние каждого набранного символа, по порядку нажатий."""
        states = []
        for index in sorted(self.input_to_transformed):
            transformed = self.input_to_transformed[index]
            if transformed is None:
                states.append(CHAR_IGNORED)
            elif transformed not in self.transformed_to_reference:
                states.append(CHAR_EXTRA)
            elif transformed in self.correct_positions:
                states.append(CHAR_CORRECT)
            else:
                states.append(CHAR_MISSPELLED)
        return states

    def to_dict(self) -> dict:
        return {
            'inputToTransformed': dict(self.input_to_transformed),
            'transformedToReference': dict(self.transformed_to_reference),
            'referenceMatched': sorted(self.reference_matched),
            'missingBetween': dict(self.missing_between),
            'correctPositions': sorted(self.correct_positions),
        }


EMPTY_ALIGNMENT = CharacterAlignment()


# =============================================================================
# ВЫРАВНИВАНИЕ
# =============================================================================

def _edit_matrix(source: str, target: str) -> List[List[int]]:
    """Полная матрица расстояния Левенштейна с единичными стоимостями."""
    rows, cols = len(source), len(target)
    dp = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i in range(rows + 1):
        dp[i][0] = i
    for j in range(cols + 1):
        dp[0][j] = j

    for i in range(1, rows + 1):
        for j in range(1, cols + 1):
            cost = 0 if source[i - 1] == target[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,
                dp[i][j - 1] + 1,
                dp[i - 1][j - 1] + cost,
            )
    return dp


def _backtrace(transformed: str, reference: str) -> Tuple[Dict[int, int], FrozenSet[int]]:
    """Пары (ввод → эталон) и совпавшие позиции по обратному проходу матрицы."""
    dp = _edit_matrix(transformed, reference)
    pairs: Dict[int, int] = {}
    correct = set()

    i, j = len(transformed), len(reference)
    while i > 0 or j > 0:
        if i > 0 and j > 0:
            same = transformed[i - 1] == reference[j - 1]
            if dp[i][j] == dp[i - 1][j - 1] + (0 if same else 1):
                pairs[i - 1] = j - 1
                if same:
                    correct.add(i - 1)
                i -= 1
                j -= 1
                continue
        if i > 0 and dp[i][j] == dp[i - 1][j] + 1:
            i -= 1
        else:
            j -= 1

    return pairs, frozenset(correct)


def _leading_cluster(transformed: str, reference: str) -> Optional[CharacterAlignment]:
    """
    Начальный кластер с пропущенной буквой: "shule" ↔ "schule".

    Набранные буквы кластера верны, пропуск записывается в missing_between
    перед следующей набранной буквой.
    """
    for full, short in LEADING_CLUSTERS:
        if not reference.startswith(full) or transformed != short + reference[len(full):]:
            continue

        pairs: Dict[int, int] = {}
        missing_between: Dict[int, int] = {}
        j = 0
        for i, char in enumerate(short):
            start = j
            while reference[j] != char:
                j += 1
            if j > start:
                missing_between[i] = j - start
            pairs[i] = j
            j += 1

        offset = len(full) - len(short)
        for i in range(len(short), len(transformed)):
            pairs[i] = i + offset

        return CharacterAlignment(
            transformed_to_reference=pairs,
            missing_between=missing_between,
            correct_positions=frozenset(pairs),
            transformed_length=len(transformed),
            reference_length=len(reference),
        )
    return None


def align_characters(input_word, reference_word) -> CharacterAlignment:
    """
    Побуквенное выравнивание набранного слова с эталоном.

    Args:
        input_word: Слово как его набрал ученик (с нотациями "ae", "s:")
        reference_word: Слово эталона

    Returns:
        CharacterAlignment; пустое выравнивание для пустых слов и при сбое

    Пример:
        >>> a = align_characters('Hauss', 'Haus')
        >>> a.extra_transformed_positions
        [3]
    """
    try:
        transformed, input_map = transform_with_positions(input_word)
        reference = normalize(reference_word)
        if not transformed or not reference:
            logger.debug(f"Пустое слово для выравнивания: {input_word!r} / {reference_word!r}")
            return EMPTY_ALIGNMENT

        special = _leading_cluster(transformed, reference)
        if special is not None:
            return CharacterAlignment(
                input_to_transformed=input_map,
                transformed_to_reference=special.transformed_to_reference,
                missing_between=special.missing_between,
                correct_positions=special.correct_positions,
                transformed_length=special.transformed_length,
                reference_length=special.reference_length,
            )

        pairs, correct = _backtrace(transformed, reference)
        return CharacterAlignment(
            input_to_transformed=input_map,
            transformed_to_reference=pairs,
            correct_positions=correct,
            transformed_length=len(transformed),
            reference_length=len(reference),
        )
    except Exception as e:
        logger.error(f"Ошибка выравнивания {input_word!r} / {reference_word!r}: {e}", exc_info=True)
        return EMPTY_ALIGNMENT
