"""
Конфигурация сравнения диктантов v1.1.

Явная структура настроек вместо «утиного» объекта опций.
Невалидная конфигурация — ошибка программиста: ValueError при создании.

v1.1 (2026-10-10): from_dict принимает camelCase и snake_case
v1.0 (2026-10-05): Начальная версия
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from .constants import AUTO_LAYOUT, KEYBOARD_LAYOUTS

VERSION = '1.1.0'

LOGGER_NAMESPACE = 'dictation'

# Внешние имена опций (camelCase) → поля ComparisonConfig
CAMEL_CASE_FIELDS: Dict[str, str] = {
    'minimumMatchThreshold': 'minimum_match_threshold',
    'caseSensitive': 'case_sensitive',
    'keyboardLayout': 'keyboard_layout',
    'useKeyboardProximity': 'use_keyboard_proximity',
    'useLengthBasedThresholds': 'use_length_based_thresholds',
    'useTypoPatternBonus': 'use_typo_pattern_bonus',
}


def get_logger(name: str) -> logging.Logger:
    """Дочерний логгер пакета: dictation.<модуль>."""
    short = name.rsplit('.', 1)[-1]
    return logging.getLogger(f'{LOGGER_NAMESPACE}.{short}')


logger = get_logger(__name__)


@dataclass(frozen=True)
class ComparisonConfig:
    """
    Настройки сравнения.

    Использование:
        config = ComparisonConfig(keyboard_layout='qwertz')
        config = ComparisonConfig.from_dict({'caseSensitive': True})
    """

    minimum_match_threshold: float = 0.3
    case_sensitive: bool = False
    keyboard_layout: str = AUTO_LAYOUT
    use_keyboard_proximity: bool = True
    use_length_based_thresholds: bool = True
    use_typo_pattern_bonus: bool = True

    def __post_init__(self):
        threshold = self.minimum_match_threshold
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            raise ValueError(f"minimum_match_threshold должен быть числом: {threshold!r}")
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"minimum_match_threshold вне диапазона [0, 1]: {threshold}")

        allowed = (AUTO_LAYOUT,) + KEYBOARD_LAYOUTS
        if self.keyboard_layout not in allowed:
            raise ValueError(
                f"Неизвестная раскладка: {self.keyboard_layout!r}. Доступные: {list(allowed)}"
            )

    @classmethod
    def from_dict(cls, config_dict: Optional[Dict[str, Any]]) -> 'ComparisonConfig':
        """
        Создаёт конфигурацию из словаря.

        Принимает внешние имена (minimumMatchThreshold) и имена полей
        (minimum_match_threshold). Неизвестные ключи пропускаются с предупреждением.
        """
        if not config_dict:
            return cls()

        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in config_dict.items():
            name = CAMEL_CASE_FIELDS.get(key, key)
            if name not in known:
                logger.warning(f"Неизвестная опция сравнения пропущена: {key}")
                continue
            values[name] = value

        if isinstance(values.get('keyboard_layout'), str):
            values['keyboard_layout'] = values['keyboard_layout'].lower()

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Конвертирует во внешние имена (camelCase)."""
        return {camel: getattr(self, name) for camel, name in CAMEL_CASE_FIELDS.items()}


DEFAULT_CONFIG = ComparisonConfig()
