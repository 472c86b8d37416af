#!/usr/bin/env python3
"""
conftest.py — общие фикстуры и конфигурация для pytest

Настройка путей, общие данные для тестов.
"""

import sys
from pathlib import Path

import pytest


# =============================================================================
# НАСТРОЙКА ПУТЕЙ
# =============================================================================

PROJECT_DIR = Path(__file__).parent.parent
INSTRUMENTS_DIR = PROJECT_DIR / 'Инструменты'
TESTS_DIR = PROJECT_DIR / 'Тесты'

# Добавляем путь к модулям один раз
if str(INSTRUMENTS_DIR) not in sys.path:
    sys.path.insert(0, str(INSTRUMENTS_DIR))


# =============================================================================
# МАРКЕРЫ
# =============================================================================

def pytest_configure(config):
    """Регистрируем кастомные маркеры"""
    config.addinivalue_line("markers", "scenario: сквозные сценарии сравнения предложений")
    config.addinivalue_line("markers", "integration: интеграционные тесты (CLI, файлы)")


# =============================================================================
# ОБЩИЕ ФИКСТУРЫ
# =============================================================================

@pytest.fixture
def project_dir():
    """Путь к корню проекта"""
    return PROJECT_DIR


@pytest.fixture
def instruments_dir():
    """Путь к папке инструментов"""
    return INSTRUMENTS_DIR


@pytest.fixture
def default_config():
    """Настройки сравнения по умолчанию"""
    from dictation import ComparisonConfig
    return ComparisonConfig()


@pytest.fixture
def case_sensitive_config():
    """Настройки с учётом регистра"""
    from dictation import ComparisonConfig
    return ComparisonConfig(case_sensitive=True)


# =============================================================================
# ФИКСТУРЫ ПРЕДЛОЖЕНИЙ
# =============================================================================

@pytest.fixture
def scenario_sentences():
    """Эталон и ввод для сквозных сценариев"""
    return {
        'reordered': ('Es gibt viel zu tun', 'zu gibt Es tun'),
        'misspelled': ('Es gibt viel zu tun', 'esss gibtte zu tun'),
        'extra_words': (
            'Die Sonne scheint hell am Himmel',
            'Die scheint sehr hell am blauen Himmel',
        ),
        'umlaut_notation': ('schöner', 'schoener'),
    }


@pytest.fixture
def typo_pairs():
    """Пары (эталон, ввод) с типичными немецкими опечатками"""
    return {
        'cluster': ('Schule', 'Shule'),
        'umlaut': ('Tür', 'Tur'),
        'sharp_s': ('Straße', 'Strasse'),
        'double_vowel': ('Meer', 'Mer'),
    }
