#!/usr/bin/env python3
"""
Централизованная конфигурация проекта «Диктант»

Содержит:
- Пути к папкам и файлам
- Загрузку настроек сравнения из Словари/config.json
- Систему логирования
"""

from pathlib import Path
from datetime import datetime
from typing import Optional, Dict, Any
import json
import logging
import sys

from dictation.config import ComparisonConfig, LOGGER_NAMESPACE, get_logger as _package_logger


# =============================================================================
# ПУТИ
# =============================================================================

# Корневая папка проекта
PROJECT_DIR = Path(__file__).parent.parent

# Основные папки
DICTIONARIES_DIR = PROJECT_DIR / 'Словари'
TOOLS_DIR = PROJECT_DIR / 'Инструменты'
RESULTS_DIR = PROJECT_DIR / 'Результаты'
TEMP_DIR = PROJECT_DIR / 'Темп'
TESTS_DIR = PROJECT_DIR / 'Тесты'

# Настройки
CONFIG_JSON = DICTIONARIES_DIR / 'config.json'


# =============================================================================
# НАСТРОЙКИ СРАВНЕНИЯ
# =============================================================================

def load_json_config(path: Path = None) -> Dict[str, Any]:
    """
    Загружает Словари/config.json.

    Отсутствующий или битый файл → пустой словарь (с предупреждением в лог).
    """
    path = Path(path) if path else CONFIG_JSON
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logging.getLogger(LOGGER_NAMESPACE).warning(f"Не удалось прочитать {path}: {e}")
        return {}
    return data if isinstance(data, dict) else {}


def load_comparison_config(
    path: Path = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> ComparisonConfig:
    """
    Настройки сравнения: секция "comparison" из config.json + переопределения.

    Args:
        path: Путь к JSON (None = Словари/config.json)
        overrides: Опции поверх файла (например, из аргументов командной строки)

    Returns:
        ComparisonConfig

    Raises:
        ValueError: Невалидные значения в файле или переопределениях
    """
    section = load_json_config(path).get('comparison', {})
    merged = dict(section) if isinstance(section, dict) else {}
    if overrides:
        merged.update({k: v for k, v in overrides.items() if v is not None})
    return ComparisonConfig.from_dict(merged)


# =============================================================================
# СИСТЕМА ЛОГИРОВАНИЯ
# =============================================================================

# Папка для логов
LOGS_DIR = TEMP_DIR / 'logs'


class LogConfig:
    """Конфигурация системы логирования."""

    # Формат сообщений
    FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

    # Уровни логирования
    DEFAULT_LEVEL = 'INFO'
    FILE_LEVEL = 'DEBUG'  # В файл пишем всё

    # Ротация логов
    MAX_LOG_FILES = 10  # Хранить последние N логов
    LOG_PREFIX = 'dictation_'

    # Имя текущей сессии логирования
    _session_id = None
    _initialized = False


def setup_logging(
    level: str = None,
    log_file: str = None,
    module_name: str = None,
    console: bool = True,
    session_id: str = None
) -> logging.Logger:
    """
    Настраивает логирование для проекта.

    Args:
        level: Уровень консоли ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        log_file: Путь к файлу лога (None = авто в LOGS_DIR)
        module_name: Имя корневого логгера (None = 'dictation')
        console: Выводить в консоль
        session_id: ID сессии для имени файла

    Returns:
        Настроенный логгер

    Использование:
        from config import setup_logging, get_logger

        # В начале main():
        setup_logging(level='DEBUG')  # Настроить один раз

        # В модулях:
        logger = get_logger(__name__)
        logger.info("Сообщение")
    """
    if level is None:
        level = LogConfig.DEFAULT_LEVEL

    log_level = getattr(logging, level.upper(), logging.INFO)

    LOGS_DIR.mkdir(parents=True, exist_ok=True)

    if session_id is None:
        if LogConfig._session_id is None:
            LogConfig._session_id = datetime.now().strftime('%Y%m%d_%H%M%S')
        session_id = LogConfig._session_id

    if log_file is None:
        log_file = LOGS_DIR / f'{LogConfig.LOG_PREFIX}{session_id}.log'
    else:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        LogConfig.FORMAT,
        datefmt=LogConfig.DATE_FORMAT
    )

    # Корневой логгер проекта: модули пакета пишут в его дочерние логгеры
    logger = logging.getLogger(module_name or LOGGER_NAMESPACE)

    # Не настраиваем повторно
    if LogConfig._initialized and logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)  # Логгер принимает всё, фильтруют handlers
    logger.handlers.clear()

    # Файл: всё, начиная с DEBUG
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(getattr(logging, LogConfig.FILE_LEVEL))
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    # Консоль: заданный уровень
    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s' if log_level >= logging.WARNING
            else '%(message)s'
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    cleanup_old_logs(LOGS_DIR, LogConfig.MAX_LOG_FILES)

    LogConfig._initialized = True

    logger.debug(f"=== Сессия логирования начата: {session_id} ===")
    logger.debug(f"Лог-файл: {log_file}")

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Получает логгер для модуля.

    Args:
        name: Имя модуля (обычно __name__)

    Returns:
        Дочерний логгер 'dictation.<модуль>'
    """
    if name is None:
        return logging.getLogger(LOGGER_NAMESPACE)

    # Если имя начинается с пути, берём только имя модуля
    if '/' in name or '\\' in name:
        name = Path(name).stem

    return _package_logger(name)


def cleanup_old_logs(logs_dir: Path, keep_count: int = 10) -> int:
    """
    Удаляет старые лог-файлы, оставляя последние N.

    Returns:
        Количество удалённых файлов
    """
    if not logs_dir.exists():
        return 0

    log_files = sorted(
        logs_dir.glob(f'{LogConfig.LOG_PREFIX}*.log'),
        key=lambda f: f.stat().st_mtime,
        reverse=True
    )

    deleted = 0
    for old_log in log_files[keep_count:]:
        try:
            old_log.unlink()
            deleted += 1
        except OSError:
            continue

    return deleted


def log_exception(logger: logging.Logger, msg: str, exc: Exception = None):
    """Логирует исключение с полным traceback."""
    if exc:
        logger.error(f"{msg}: {exc}", exc_info=True)
    else:
        logger.error(msg, exc_info=True)
