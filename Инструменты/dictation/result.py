"""
Модели результата сравнения и их сборка v1.1.

Содержит:
- Word — слово с позицией в своей последовательности
- WordMatch — пара «эталон ↔ ввод» со статусом
- ComparisonStats — счётчики и точность
- ComparisonResult — итог одного вызова compare()
- assemble — сборка результата из сопоставлений

Все модели неизменяемые: результат создаётся заново на каждый вызов.

v1.1 (2026-10-15): textSimilarity, isCompleteMatch, shouldAutoAdvance
v1.0 (2026-10-06): Начальная версия
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .char_aligner import CharacterAlignment
from .normalizer import normalize, normalize_word

VERSION = '1.1.0'

# Статусы слов
STATUS_CORRECT = 'correct'
STATUS_MISSPELLED = 'misspelled'
STATUS_MISSING = 'missing'
STATUS_EXTRA = 'extra'

STATUSES = (STATUS_CORRECT, STATUS_MISSPELLED, STATUS_MISSING, STATUS_EXTRA)


@dataclass(frozen=True)
class Word:
    """Слово как оно набрано, с позицией (0..n-1)"""
    text: str
    position: int

    @property
    def key(self) -> str:
        """Ключ сравнения: нормализованный, нижний регистр."""
        return normalize_word(self.text)

    @property
    def display(self) -> str:
        """Нормализованная форма с сохранённым регистром."""
        return normalize(self.text, preserve_case=True)

    def to_dict(self) -> dict:
        return {'text': self.text, 'position': self.position}


@dataclass(frozen=True)
class WordMatch:
    """Сопоставление слова эталона со словом ввода"""
    expected: Optional[Word]
    actual: Optional[Word]
    status: str
    similarity: float = 0.0
    alignment: Optional[CharacterAlignment] = None  # только для misspelled

    def to_dict(self) -> dict:
        return {
            'expected': self.expected.to_dict() if self.expected else None,
            'actual': self.actual.to_dict() if self.actual else None,
            'status': self.status,
            'similarity': round(self.similarity, 4),
            'alignment': self.alignment.to_dict() if self.alignment else None,
        }


@dataclass(frozen=True)
class ComparisonStats:
    """Счётчики статусов; accuracy = верные / слова эталона"""
    correct: int = 0
    misspelled: int = 0
    missing: int = 0
    extra: int = 0
    accuracy: float = 0.0

    def to_dict(self) -> dict:
        return {
            'correct': self.correct,
            'misspelled': self.misspelled,
            'missing': self.missing,
            'extra': self.extra,
            'accuracy': round(self.accuracy, 4),
        }


@dataclass(frozen=True)
class ComparisonResult:
    """Результат сравнения ввода с эталоном"""
    words: Tuple[WordMatch, ...]
    extra_words: Tuple[WordMatch, ...]
    stats: ComparisonStats
    input_text: str
    reference_text: str
    text_similarity: float = 0.0
    is_complete_match: bool = False
    should_auto_advance: bool = False

    def to_dict(self) -> dict:
        """Внешнее представление (имена полей как в интерфейсе диктанта)."""
        return {
            'words': [match.to_dict() for match in self.words],
            'extraWords': [match.to_dict() for match in self.extra_words],
            'stats': self.stats.to_dict(),
            'inputText': self.input_text,
            'referenceText': self.reference_text,
            'textSimilarity': round(self.text_similarity, 4),
            'isCompleteMatch': self.is_complete_match,
            'shouldAutoAdvance': self.should_auto_advance,
        }


# =============================================================================
# СБОРКА РЕЗУЛЬТАТА
# =============================================================================

def calculate_stats(
    word_matches: Sequence[WordMatch],
    extra_words: Sequence[WordMatch],
) -> ComparisonStats:
    """Подсчёт статусов. word_matches — по одному на слово эталона."""
    counts = {status: 0 for status in STATUSES}
    for match in word_matches:
        counts[match.status] += 1

    total = len(word_matches)
    accuracy = counts[STATUS_CORRECT] / total if total else 0.0

    return ComparisonStats(
        correct=counts[STATUS_CORRECT],
        misspelled=counts[STATUS_MISSPELLED],
        missing=counts[STATUS_MISSING],
        extra=len(extra_words),
        accuracy=accuracy,
    )


def assemble(
    word_matches: Sequence[WordMatch],
    extra_words: Sequence[WordMatch],
    input_text: str,
    reference_text: str,
    text_similarity: float = 0.0,
    suppress_auto_advance: bool = False,
) -> ComparisonResult:
    """
    Собирает ComparisonResult.

    Полное совпадение: все слова эталона верны и нет лишних.
    Автопереход — при полном совпадении, если вызывающий его не подавил.
    """
    stats = calculate_stats(word_matches, extra_words)
    complete = bool(word_matches) and stats.correct == len(word_matches) and not extra_words

    return ComparisonResult(
        words=tuple(word_matches),
        extra_words=tuple(extra_words),
        stats=stats,
        input_text=input_text,
        reference_text=reference_text,
        text_similarity=text_similarity,
        is_complete_match=complete,
        should_auto_advance=complete and not suppress_auto_advance,
    )


def words_with_status(result: ComparisonResult, status: str) -> List[WordMatch]:
    """Сопоставления с данным статусом (лишние слова — из extra_words)."""
    source = result.extra_words if status == STATUS_EXTRA else result.words
    return [match for match in source if match.status == status]
