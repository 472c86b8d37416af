"""
Пакет сравнения диктантов — v1.2

Сравнивает набранный учеником текст с эталонным немецким предложением:
какие слова верны, с ошибкой, пропущены или лишние, и какие буквы
внутри слова с ошибкой набраны правильно.

Модули:
- constants.py v1.3 — нотации умлаутов/эсцета, пороги, раскладки клавиатуры
- config.py v1.1 — ComparisonConfig, логгеры пакета
- normalizer.py v1.4 — нормализация + карта позиций символов
- keyboard.py v1.1 — соседство клавиш QWERTZ / QWERTY / AZERTY
- similarity.py v1.5 — оценка схожести слов и предложений
- word_aligner.py v1.2 — сопоставление слов (резерв точных + жадный проход)
- char_aligner.py v1.2 — побуквенное выравнивание слов с ошибкой
- result.py v1.1 — модели результата и сборка
- engine.py v1.2 — compare()

Использование:
    from dictation import compare

    result = compare('Die Sonne scheint', 'Die Sone scheint')
    result.stats.accuracy      # 0.666...
    result.to_dict()           # внешнее представление
"""

from .char_aligner import CharacterAlignment, align_characters
from .config import ComparisonConfig
from .engine import compare, tokenize
from .keyboard import is_keyboard_adjacent, keyboard_proximity_cost
from .normalizer import normalize, normalize_word, transform_with_positions
from .result import (
    ComparisonResult, ComparisonStats, Word, WordMatch, assemble,
    STATUS_CORRECT, STATUS_MISSPELLED, STATUS_MISSING, STATUS_EXTRA,
)
from .similarity import score, text_similarity
from .word_aligner import AlignmentOutcome, align

__version__ = '1.2.0'

__all__ = [
    'compare',
    'tokenize',
    'ComparisonConfig',
    'ComparisonResult',
    'ComparisonStats',
    'Word',
    'WordMatch',
    'CharacterAlignment',
    'AlignmentOutcome',
    'align',
    'align_characters',
    'assemble',
    'score',
    'text_similarity',
    'normalize',
    'normalize_word',
    'transform_with_positions',
    'is_keyboard_adjacent',
    'keyboard_proximity_cost',
    'STATUS_CORRECT',
    'STATUS_MISSPELLED',
    'STATUS_MISSING',
    'STATUS_EXTRA',
]
