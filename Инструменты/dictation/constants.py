"""
Словари и константы сравнения диктантов v1.3.

Содержит:
- UMLAUT_NOTATIONS — ASCII-записи умлаутов (ae, aE, a:, a/ → ä)
- SHARP_S_* — записи эсцета (s:, s/, B между буквами) и словарные исключения
- CLUSTER_SIMPLIFICATIONS — упрощения согласных кластеров (sch → sh)
- Пороги и бонусы оценки схожести
- Раскладки клавиатуры QWERTZ / QWERTY / AZERTY (карты соседства)

v1.3 (2026-10-18): Маркер умлаута E для текста заглавными (SCHOENER)
v1.2 (2026-10-12): Таблицы соседства клавиш перенесены из keyboard.py
v1.1 (2026-10-08): Исключения для эсцета на конце слова (FuB → Fuß)
v1.0 (2026-10-05): Начальная версия
"""

from typing import Dict, FrozenSet, Tuple

VERSION = '1.3.0'


# =============================================================================
# НОТАЦИИ УМЛАУТОВ И ЭСЦЕТА
# =============================================================================

# Гласная + e / E / : / / → умлаут. Регистр берётся от гласной: "Ae", "OE", "O:" → "Ä", "Ö", "Ö"
UMLAUT_NOTATIONS: Dict[str, str] = {
    'a': 'ä', 'o': 'ö', 'u': 'ü',
    'A': 'Ä', 'O': 'Ö', 'U': 'Ü',
}
UMLAUT_MARKERS = 'eE:/'

SHARP_S = 'ß'
SHARP_S_MARKERS = ':/'

# Основы частых слов, где эсцет стоит в конце: "FuB" → "Fuß".
# Общее правило ловит B только МЕЖДУ буквами, на конце слова работает только словарь
SHARP_S_FINAL_STEMS: FrozenSet[str] = frozenset({
    'fu', 'wei', 'hei', 'gro', 'blo', 'mu', 'da', 'bi', 'flu', 'gru',
    'ku', 'schlo', 'spa', 'sto', 'fra', 'ma', 'gie', 'genu', 'flei',
})

# Слова, где заглавная B остаётся B, а не эсцет
SHARP_S_KEEP_WORDS: FrozenSet[str] = frozenset({
    'eBay', 'eBook', 'eBooks', 'iBook', 'WhatsApp', 'YouTube',
})


# =============================================================================
# ПОРОГИ ОЦЕНКИ СХОЖЕСТИ
# =============================================================================

EXACT_SCORE = 1.0
CASE_INSENSITIVE_SCORE = 0.95
CORRECT_SCORE = 0.95        # >= 0.95 → слово засчитано как верное
MAX_FUZZY_SCORE = 0.99      # нечёткое совпадение никогда не равно точному

# Подстрока (сокращённые составные слова: "Montag" ↔ "Montagmorgen")
SUBSTRING_MIN_RATIO = 0.3
SUBSTRING_MIN_SCORE = 0.7
SUBSTRING_BASE = 0.5
SUBSTRING_WEIGHT = 0.45

# Клавиатура
ADJACENT_KEY_COST = 0.8
DEFAULT_SUBSTITUTION_COST = 1.0

# Порог по длине слова
LENGTH_THRESHOLD_START = 10      # до 10 символов порог не меняется
LENGTH_THRESHOLD_STEP = 0.05     # -5% порога за каждый символ сверху
LENGTH_THRESHOLD_MIN_FACTOR = 0.5
LENGTH_THRESHOLD_FLOOR = 0.2

# Бонусы за типичные опечатки
MAX_TYPO_BONUS = 0.15
CLUSTER_BONUS = 0.15
UMLAUT_BONUS = 0.15
SHARP_S_BONUS = 0.1
DOUBLE_VOWEL_BONUS = 0.1
UMLAUT_POSITION_TOLERANCE = 2

# Упрощения согласных кластеров: (правильно, как пишут)
CLUSTER_SIMPLIFICATIONS: Tuple[Tuple[str, str], ...] = (
    ('sch', 'sh'),
    ('ck', 'k'),
    ('tz', 'z'),
)

# Кластер в начале слова, пропущенная буква которого показывается
# как "пропуск между" буквами, а не как обычное удаление
LEADING_CLUSTERS: Tuple[Tuple[str, str], ...] = (
    ('sch', 'sh'),
)

UMLAUT_BASE_VOWELS: Dict[str, str] = {'ä': 'a', 'ö': 'o', 'ü': 'u'}
DOUBLE_VOWELS: Tuple[str, ...] = ('aa', 'ee', 'oo')


# =============================================================================
# РАСКЛАДКИ КЛАВИАТУРЫ
# =============================================================================

KEYBOARD_LAYOUTS: Tuple[str, ...] = ('qwertz', 'qwerty', 'azerty')
AUTO_LAYOUT = 'auto'

# Немецкая QWERTZ: клавиша → соседние клавиши
QWERTZ_ADJACENCY: Dict[str, Tuple[str, ...]] = {
    # Цифровой ряд
    '1': ('2', 'q'),
    '2': ('1', '3', 'q', 'w'),
    '3': ('2', '4', 'w', 'e'),
    '4': ('3', '5', 'e', 'r'),
    '5': ('4', '6', 'r', 't'),
    '6': ('5', '7', 't', 'z'),
    '7': ('6', '8', 'z', 'u'),
    '8': ('7', '9', 'u', 'i'),
    '9': ('8', '0', 'i', 'o'),
    '0': ('9', 'ß', 'o', 'p'),
    'ß': ('0', '´', 'p', 'ü'),
    '´': ('ß', 'ü', '+'),
    # Верхний ряд
    'q': ('1', '2', 'w', 'a'),
    'w': ('2', '3', 'q', 'e', 'a', 's'),
    'e': ('3', '4', 'w', 'r', 's', 'd'),
    'r': ('4', '5', 'e', 't', 'd', 'f'),
    't': ('5', '6', 'r', 'z', 'f', 'g'),
    'z': ('6', '7', 't', 'u', 'g', 'h'),
    'u': ('7', '8', 'z', 'i', 'h', 'j'),
    'i': ('8', '9', 'u', 'o', 'j', 'k'),
    'o': ('9', '0', 'i', 'p', 'k', 'l'),
    'p': ('0', 'ß', 'o', 'ü', 'l', 'ö'),
    'ü': ('ß', 'p', 'ö', 'ä'),
    '+': ('´',),
    # Средний ряд
    'a': ('q', 'w', 's', 'y'),
    's': ('w', 'e', 'a', 'd', 'y', 'x'),
    'd': ('e', 'r', 's', 'f', 'x', 'c'),
    'f': ('r', 't', 'd', 'g', 'c', 'v'),
    'g': ('t', 'z', 'f', 'h', 'v', 'b'),
    'h': ('z', 'u', 'g', 'j', 'b', 'n'),
    'j': ('u', 'i', 'h', 'k', 'n', 'm'),
    'k': ('i', 'o', 'j', 'l', 'm', ','),
    'l': ('o', 'p', 'k', 'ö', ',', '.'),
    'ö': ('p', 'ü', 'l', 'ä', '.', '-'),
    'ä': ('ü', 'ö', '-'),
    '#': ('+', 'ä'),
    # Нижний ряд
    'y': ('a', 's', 'x', '<'),
    'x': ('s', 'd', 'y', 'c', '<'),
    'c': ('d', 'f', 'x', 'v'),
    'v': ('f', 'g', 'c', 'b'),
    'b': ('g', 'h', 'v', 'n'),
    'n': ('h', 'j', 'b', 'm'),
    'm': ('j', 'k', 'n', ','),
    ',': ('k', 'l', 'm', '.'),
    '.': ('l', 'ö', ',', '-'),
    '-': ('ö', 'ä', '.'),
}

# Американская QWERTY
QWERTY_ADJACENCY: Dict[str, Tuple[str, ...]] = {
    '1': ('2', 'q'),
    '2': ('1', '3', 'q', 'w'),
    '3': ('2', '4', 'w', 'e'),
    '4': ('3', '5', 'e', 'r'),
    '5': ('4', '6', 'r', 't'),
    '6': ('5', '7', 't', 'y'),
    '7': ('6', '8', 'y', 'u'),
    '8': ('7', '9', 'u', 'i'),
    '9': ('8', '0', 'i', 'o'),
    '0': ('9', '-', 'o', 'p'),
    '-': ('0', '=', 'p', '['),
    '=': ('-', '[', ']'),
    'q': ('1', '2', 'w', 'a'),
    'w': ('2', '3', 'q', 'e', 'a', 's'),
    'e': ('3', '4', 'w', 'r', 's', 'd'),
    'r': ('4', '5', 'e', 't', 'd', 'f'),
    't': ('5', '6', 'r', 'y', 'f', 'g'),
    'y': ('6', '7', 't', 'u', 'g', 'h'),
    'u': ('7', '8', 'y', 'i', 'h', 'j'),
    'i': ('8', '9', 'u', 'o', 'j', 'k'),
    'o': ('9', '0', 'i', 'p', 'k', 'l'),
    'p': ('0', '-', 'o', '[', 'l', ';'),
    '[': ('-', '=', 'p', ']', ';', "'"),
    ']': ('=', '[', "'", '\\'),
    'a': ('q', 'w', 's', 'z'),
    's': ('w', 'e', 'a', 'd', 'z', 'x'),
    'd': ('e', 'r', 's', 'f', 'x', 'c'),
    'f': ('r', 't', 'd', 'g', 'c', 'v'),
    'g': ('t', 'y', 'f', 'h', 'v', 'b'),
    'h': ('y', 'u', 'g', 'j', 'b', 'n'),
    'j': ('u', 'i', 'h', 'k', 'n', 'm'),
    'k': ('i', 'o', 'j', 'l', 'm', ','),
    'l': ('o', 'p', 'k', ';', ',', '.'),
    ';': ('p', '[', 'l', "'", '.', '/'),
    "'": ('[', ']', ';', '\\', '/', '.'),
    '\\': (']', "'", '/'),
    'z': ('a', 's', 'x'),
    'x': ('s', 'd', 'z', 'c'),
    'c': ('d', 'f', 'x', 'v'),
    'v': ('f', 'g', 'c', 'b'),
    'b': ('g', 'h', 'v', 'n'),
    'n': ('h', 'j', 'b', 'm'),
    'm': ('j', 'k', 'n', ','),
    ',': ('k', 'l', 'm', '.'),
    '.': ('l', ';', ',', '/'),
    '/': (';', "'", '.', '\\'),
}

# Французская AZERTY
AZERTY_ADJACENCY: Dict[str, Tuple[str, ...]] = {
    '&': ('é', 'a'),
    'é': ('&', '"', 'a', 'z'),
    '"': ('é', "'", 'z', 'e'),
    "'": ('"', '(', 'e', 'r'),
    '(': ("'", '-', 'r', 't'),
    '-': ('(', 'è', 't', 'y'),
    'è': ('-', '_', 'y', 'u'),
    '_': ('è', 'ç', 'u', 'i'),
    'ç': ('_', 'à', 'i', 'o'),
    'à': ('ç', ')', 'o', 'p'),
    ')': ('à', '=', 'p'),
    'a': ('&', 'é', 'z', 'q'),
    'z': ('é', '"', 'a', 'e', 'q', 's'),
    'e': ('"', "'", 'z', 'r', 's', 'd'),
    'r': ("'", '(', 'e', 't', 'd', 'f'),
    't': ('(', '-', 'r', 'y', 'f', 'g'),
    'y': ('-', 'è', 't', 'u', 'g', 'h'),
    'u': ('è', '_', 'y', 'i', 'h', 'j'),
    'i': ('_', 'ç', 'u', 'o', 'j', 'k'),
    'o': ('ç', 'à', 'i', 'p', 'k', 'l'),
    'p': ('à', ')', 'o', 'l', 'm'),
    'q': ('a', 'z', 's', 'w'),
    's': ('z', 'e', 'q', 'd', 'w', 'x'),
    'd': ('e', 'r', 's', 'f', 'x', 'c'),
    'f': ('r', 't', 'd', 'g', 'c', 'v'),
    'g': ('t', 'y', 'f', 'h', 'v', 'b'),
    'h': ('y', 'u', 'g', 'j', 'b', 'n'),
    'j': ('u', 'i', 'h', 'k', 'n', ','),
    'k': ('i', 'o', 'j', 'l', ',', ';'),
    'l': ('o', 'p', 'k', 'm', ';', ':'),
    'm': ('p', 'l', ':', '!'),
    'w': ('q', 's', 'x'),
    'x': ('s', 'd', 'w', 'c'),
    'c': ('d', 'f', 'x', 'v'),
    'v': ('f', 'g', 'c', 'b'),
    'b': ('g', 'h', 'v', 'n'),
    'n': ('h', 'j', 'b', ','),
    ',': ('j', 'k', 'n', ';'),
    ';': ('k', 'l', ',', ':'),
    ':': ('l', 'm', ';', '!'),
    '!': ('m', ':'),
}

ADJACENCY_MAPS: Dict[str, Dict[str, Tuple[str, ...]]] = {
    'qwertz': QWERTZ_ADJACENCY,
    'qwerty': QWERTY_ADJACENCY,
    'azerty': AZERTY_ADJACENCY,
}
