#!/usr/bin/env python3
"""
Тесты для dictation/similarity.py

Покрывает:
- Правила score по порядку (точное, регистр, подстрока, расстояние, бонус)
- Порог по длине слова
- Бонусы за опечатки
- Расстояние с учётом клавиатуры
- Схожесть предложений

Запуск:
    pytest Тесты/test_similarity.py -v
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / 'Инструменты'))

import pytest
from dictation import ComparisonConfig
from dictation.similarity import (
    score, levenshtein_distance, keyboard_levenshtein,
    detect_typo_patterns, length_adjusted_threshold, text_similarity,
)


# =============================================================================
# ПРАВИЛА ОЦЕНКИ
# =============================================================================

class TestScoreRules:
    """Тесты правил score"""

    def test_exact(self):
        assert score('Haus', 'Haus') == 1.0

    def test_exact_after_normalization(self):
        assert score('schöner', 'schoener') == 1.0
        assert score('Haus', 'Haus!') == 1.0

    def test_case_only(self):
        assert score('Haus', 'haus') == 0.95

    def test_uppercase_notation_is_case_only(self):
        assert score('Öl', 'OEL') == 0.95
        assert score('Schöner', 'SCHOENER') == 0.95

    def test_substring_compound(self):
        # 6/12 → 0.5 + 0.45 * 0.5
        assert score('Montagmorgen', 'Montag') == pytest.approx(0.725)

    def test_substring_short_ratio_rejected(self):
        # "es" в "gesellschaft": 2/12 < 0.3 → обычное расстояние
        assert score('es', 'Gesellschaft') < 0.5

    def test_substring_examples(self):
        assert score('Es', 'esss') == pytest.approx(0.725)
        assert score('gibt', 'gibtte') == pytest.approx(0.8)

    def test_fuzzy_never_reaches_exact(self):
        for expected, actual in [('Schule', 'Shule'), ('Hause', 'Haus'), ('Tür', 'Tur')]:
            assert score(expected, actual) <= 0.99

    def test_unrelated_words(self):
        assert score('Katze', 'Hund') == 0.0

    def test_empty(self):
        assert score('', 'Haus') == 0.0
        assert score('Haus', None) == 0.0
        assert score('!!', 'Haus') == 0.0

    def test_range(self):
        for expected, actual in [('Sonne', 'scheint'), ('a', 'b'), ('Fenster', 'Fenstre')]:
            assert 0.0 <= score(expected, actual) <= 1.0


class TestTypoTolerance:
    """Опечатки, которые должны прощаться"""

    def test_cluster_simplification(self, typo_pairs):
        expected, actual = typo_pairs['cluster']
        assert score(expected, actual) > 0.7

    def test_umlaut_as_base_vowel(self, typo_pairs):
        expected, actual = typo_pairs['umlaut']
        assert score(expected, actual) > 0.7

    def test_sharp_s_as_ss(self, typo_pairs):
        expected, actual = typo_pairs['sharp_s']
        assert score(expected, actual) > 0.7

    def test_double_vowel(self, typo_pairs):
        expected, actual = typo_pairs['double_vowel']
        assert score(expected, actual) > 0.7

    def test_bonus_disabled(self):
        with_bonus = score('Schule', 'Shule')
        without = score('Schule', 'Shule', ComparisonConfig(use_typo_pattern_bonus=False))
        assert with_bonus > without

    def test_keyboard_neighbour_cheaper(self):
        # t↔z соседние на QWERTZ, t↔m нет
        neighbour = score('Katze', 'Kazze')
        far = score('Katze', 'Kamze')
        assert neighbour > far

    def test_keyboard_disabled(self):
        config = ComparisonConfig(use_keyboard_proximity=False)
        assert score('Katze', 'Kazze', config) == score('Katze', 'Kamze', config)


class TestDetectTypoPatterns:
    """Тесты бонусов за опечатки"""

    def test_sch_sh(self):
        assert detect_typo_patterns('shule', 'schule') == pytest.approx(0.15)

    def test_ck_k(self):
        assert detect_typo_patterns('baker', 'bäcker') == pytest.approx(0.15)

    def test_tz_z(self):
        assert detect_typo_patterns('kaze', 'katze') == pytest.approx(0.15)

    def test_umlaut(self):
        assert detect_typo_patterns('tur', 'tür') == pytest.approx(0.15)

    def test_sharp_s(self):
        assert detect_typo_patterns('strasse', 'straße') > 0

    def test_double_vowel(self):
        assert detect_typo_patterns('mer', 'meer') == pytest.approx(0.1)

    def test_no_pattern(self):
        assert detect_typo_patterns('haus', 'baum') == 0

    def test_capped(self):
        assert detect_typo_patterns('shöss', 'schöß') <= 0.15


# =============================================================================
# ПОРОГ ПО ДЛИНЕ
# =============================================================================

class TestLengthAdjustedThreshold:
    """Тесты порога по длине слова"""

    def test_short_words_use_base(self):
        assert length_adjusted_threshold(1) == 0.3
        assert length_adjusted_threshold(10) == 0.3

    def test_long_words_lower(self):
        assert length_adjusted_threshold(12) == pytest.approx(0.27)
        assert length_adjusted_threshold(14) == pytest.approx(0.24)

    def test_floor(self):
        assert length_adjusted_threshold(40) == pytest.approx(0.2)
        assert length_adjusted_threshold(40, base=0.6) == pytest.approx(0.3)

    def test_never_above_base(self):
        assert length_adjusted_threshold(40, base=0.1) == pytest.approx(0.1)

    def test_monotonic(self):
        values = [length_adjusted_threshold(n) for n in range(1, 40)]
        assert all(a >= b for a, b in zip(values, values[1:]))

    def test_disabled(self):
        assert length_adjusted_threshold(30, base=0.3, enabled=False) == 0.3


# =============================================================================
# РАССТОЯНИЯ
# =============================================================================

class TestDistances:
    """Тесты расстояний Левенштейна"""

    def test_plain(self):
        assert levenshtein_distance('kitten', 'sitting') == 3
        assert levenshtein_distance('', 'abc') == 3

    def test_keyboard_adjacent_substitution(self):
        assert keyboard_levenshtein('katze', 'kazze', 'qwertz') == pytest.approx(0.8)

    def test_keyboard_regular_substitution(self):
        assert keyboard_levenshtein('katze', 'kamze', 'qwertz') == pytest.approx(1.0)

    def test_keyboard_insertions(self):
        assert keyboard_levenshtein('', 'abc') == 3.0
        assert keyboard_levenshtein('haus', 'hause') == 1.0

    def test_keyboard_never_above_plain(self):
        for a, b in [('sonne', 'sehr'), ('gibt', 'gubt'), ('himmel', 'hummel')]:
            assert keyboard_levenshtein(a, b) <= levenshtein_distance(a, b)


class TestTextSimilarity:
    """Тесты схожести предложений"""

    def test_identical(self):
        assert text_similarity('Es gibt viel zu tun', 'es gibt viel zu tun!') == 1.0

    def test_both_empty(self):
        assert text_similarity('', None) == 1.0

    def test_one_empty(self):
        assert text_similarity('Es gibt', '') == 0.0

    def test_partial(self):
        value = text_similarity('Es gibt viel zu tun', 'Es gibt zu tun')
        assert 0.5 < value < 1.0


if __name__ == '__main__':
    pytest.main([__file__, '-v', '--tb=short'])
