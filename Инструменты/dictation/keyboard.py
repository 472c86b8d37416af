"""
Близость клавиш на клавиатуре v1.1.

Соседние клавиши — частая причина опечаток (t↔z на QWERTZ),
поэтому замена на соседнюю клавишу дешевле обычной замены.

v1.1 (2026-10-12): Режим auto проверяет все три раскладки
v1.0 (2026-10-06): Начальная версия (QWERTZ)
"""

from typing import Dict, Tuple

from .constants import (
    ADJACENCY_MAPS, AUTO_LAYOUT, KEYBOARD_LAYOUTS,
    ADJACENT_KEY_COST, DEFAULT_SUBSTITUTION_COST,
)


def get_keyboard_layout(layout: str = AUTO_LAYOUT) -> Dict[str, Tuple[str, ...]]:
    """
    Карта соседства для раскладки.

    Неизвестная раскладка и auto → QWERTZ (инструмент для немецкого).
    """
    return ADJACENCY_MAPS.get((layout or '').lower(), ADJACENCY_MAPS['qwertz'])


def _adjacent_in(adjacency: Dict[str, Tuple[str, ...]], c1: str, c2: str) -> bool:
    return c2 in adjacency.get(c1, ()) or c1 in adjacency.get(c2, ())


def is_keyboard_adjacent(char1: str, char2: str, layout: str = AUTO_LAYOUT) -> bool:
    """
    Соседние ли клавиши. Регистр не важен, одинаковые символы — не соседи.

    Примеры:
        >>> is_keyboard_adjacent('t', 'z', 'qwertz')
        True
        >>> is_keyboard_adjacent('t', 'y', 'qwertz')
        False
    """
    c1 = char1.lower()
    c2 = char2.lower()
    if c1 == c2:
        return False

    if layout == AUTO_LAYOUT:
        return any(_adjacent_in(ADJACENCY_MAPS[name], c1, c2) for name in KEYBOARD_LAYOUTS)

    return _adjacent_in(get_keyboard_layout(layout), c1, c2)


def keyboard_proximity_cost(char1: str, char2: str, layout: str = AUTO_LAYOUT) -> float:
    """Стоимость замены: 0.8 для соседних клавиш, 1.0 иначе."""
    if is_keyboard_adjacent(char1, char2, layout):
        return ADJACENT_KEY_COST
    return DEFAULT_SUBSTITUTION_COST
