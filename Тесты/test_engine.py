#!/usr/bin/env python3
"""
Сквозные тесты compare() (dictation/engine.py, dictation/result.py)

Покрывает:
- Четыре эталонных сценария
- Свойства: тождество, порядок, пустой ввод, идемпотентность
- Побуквенное выравнивание для слов с ошибкой
- Статистику, внешнее представление, автопереход
- Конфигурацию словарём и некорректный ввод

Запуск:
    pytest Тесты/test_engine.py -v
"""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / 'Инструменты'))

import pytest
from dictation import ComparisonConfig, compare, tokenize
from dictation.result import (
    STATUS_CORRECT, STATUS_MISSPELLED, STATUS_MISSING, STATUS_EXTRA,
    words_with_status,
)


def texts(matches, side='expected'):
    return [getattr(match, side).text for match in matches]


# =============================================================================
# СЦЕНАРИИ
# =============================================================================

@pytest.mark.scenario
class TestScenarios:
    """Эталонные сценарии сравнения"""

    def test_reordered_words(self, scenario_sentences):
        result = compare(*scenario_sentences['reordered'])
        assert texts(words_with_status(result, STATUS_MISSING)) == ['viel']
        assert texts(words_with_status(result, STATUS_CORRECT)) == ['Es', 'gibt', 'zu', 'tun']
        assert result.extra_words == ()

    def test_misspelled_words(self, scenario_sentences):
        result = compare(*scenario_sentences['misspelled'])
        assert texts(words_with_status(result, STATUS_MISSING)) == ['viel']
        misspelled = words_with_status(result, STATUS_MISSPELLED)
        assert texts(misspelled) == ['Es', 'gibt']
        assert texts(misspelled, 'actual') == ['esss', 'gibtte']
        assert texts(words_with_status(result, STATUS_CORRECT)) == ['zu', 'tun']

    def test_extra_words(self, scenario_sentences):
        result = compare(*scenario_sentences['extra_words'])
        assert texts(words_with_status(result, STATUS_MISSING)) == ['Sonne']
        assert texts(words_with_status(result, STATUS_CORRECT)) == [
            'Die', 'scheint', 'hell', 'am', 'Himmel',
        ]
        assert texts(result.extra_words, 'actual') == ['sehr', 'blauen']

    def test_umlaut_notation(self, scenario_sentences):
        reference, typed = scenario_sentences['umlaut_notation']
        result = compare(reference, typed)
        assert [m.status for m in result.words] == [STATUS_CORRECT]
        assert result.words[0].similarity == 1.0
        assert result.words[0].alignment is None

    def test_uppercase_umlaut_notation(self):
        result = compare('Schöner Tag', 'SCHOENER TAG')
        assert [m.status for m in result.words] == [STATUS_CORRECT, STATUS_CORRECT]
        assert [m.similarity for m in result.words] == [0.95, 0.95]
        assert result.is_complete_match


# =============================================================================
# СВОЙСТВА
# =============================================================================

class TestProperties:
    """Общие свойства сравнения"""

    @pytest.mark.parametrize('sentence', [
        'Die Sonne scheint hell am Himmel',
        'Er weiß, dass die Straße nass ist.',
        'Schöne Grüße aus Köln!',
    ])
    def test_identity(self, sentence):
        result = compare(sentence, sentence)
        assert all(m.status == STATUS_CORRECT for m in result.words)
        assert result.stats.accuracy == 1.0
        assert result.is_complete_match

    def test_order_invariance(self):
        result = compare('Wir gehen heute ins Kino', 'Kino ins heute gehen Wir')
        assert result.stats.correct == 5
        assert result.stats.extra == 0

    def test_empty_input(self):
        result = compare('Es gibt viel zu tun', '')
        assert result.stats.missing == 5
        assert result.stats.accuracy == 0.0
        assert result.extra_words == ()

    def test_empty_reference(self):
        result = compare('', 'irgendwas')
        assert result.words == ()
        assert result.extra_words == ()
        assert result.stats.accuracy == 0.0
        assert not result.is_complete_match

    def test_normalized_input_same_result(self):
        reference = 'Die schöne Straße'
        raw = compare(reference, 'Die schoene StraBe!')
        assert all(m.status == STATUS_CORRECT for m in raw.words)

    def test_each_reference_word_once(self):
        result = compare('eins zwei drei', 'drei zwei eins zwei')
        assert len(result.words) == 3
        positions = [m.actual.position for m in result.words if m.actual]
        assert len(positions) == len(set(positions))
        assert result.stats.extra == 1

    def test_punctuation_tokens_dropped(self):
        assert [w.text for w in tokenize('Ja — nein !')] == ['Ja', 'nein']
        assert [w.position for w in tokenize('Ja — nein !')] == [0, 1]


# =============================================================================
# ВЫРАВНИВАНИЕ СИМВОЛОВ
# =============================================================================

class TestAlignmentAttached:
    """Побуквенное выравнивание в результате"""

    def test_only_misspelled_have_alignment(self):
        result = compare('Die Sonne scheint', 'Die Sone')
        by_status = {m.status: m for m in result.words}
        assert by_status[STATUS_CORRECT].alignment is None
        assert by_status[STATUS_MISSING].alignment is None
        assert by_status[STATUS_MISSPELLED].alignment is not None

    def test_alignment_within_reference(self):
        result = compare('Himmel', 'Himel')
        alignment = result.words[0].alignment
        assert alignment.missing_reference_positions
        assert all(0 <= j < 6 for j in alignment.transformed_to_reference.values())


# =============================================================================
# СТАТИСТИКА И ВНЕШНЕЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================

class TestResult:
    """Статистика, to_dict, автопереход"""

    def test_stats(self, scenario_sentences):
        result = compare(*scenario_sentences['extra_words'])
        stats = result.stats
        assert (stats.correct, stats.misspelled, stats.missing, stats.extra) == (5, 0, 1, 2)
        assert stats.accuracy == pytest.approx(5 / 6)

    def test_to_dict_field_names(self, scenario_sentences):
        result = compare(*scenario_sentences['misspelled'])
        data = result.to_dict()
        for key in ('words', 'extraWords', 'stats', 'inputText', 'referenceText'):
            assert key in data
        assert data['inputText'] == 'esss gibtte zu tun'
        assert data['referenceText'] == 'Es gibt viel zu tun'
        assert set(data['stats']) == {'correct', 'misspelled', 'missing', 'extra', 'accuracy'}
        json.dumps(data, ensure_ascii=False)

    def test_auto_advance(self):
        result = compare('Guten Morgen', 'guten Morgen')
        assert result.is_complete_match
        assert result.should_auto_advance

    def test_auto_advance_suppressed(self):
        result = compare('Guten Morgen', 'Guten Morgen', suppress_auto_advance=True)
        assert result.is_complete_match
        assert not result.should_auto_advance

    def test_extra_word_blocks_complete_match(self):
        result = compare('Guten Morgen', 'Guten Morgen Welt')
        assert not result.is_complete_match

    def test_text_similarity(self):
        assert compare('Guten Morgen', 'Guten Morgen').text_similarity == 1.0
        assert 0.0 < compare('Guten Morgen', 'Guten').text_similarity < 1.0

    def test_result_is_frozen(self):
        result = compare('Guten Morgen', 'Guten')
        with pytest.raises(AttributeError):
            result.input_text = 'x'


# =============================================================================
# НАСТРОЙКИ И НЕКОРРЕКТНЫЙ ВВОД
# =============================================================================

class TestConfigAndInput:
    """Настройки словарём, None и не-строки"""

    def test_dict_config(self):
        result = compare('Sonne', 'sonne', {'caseSensitive': True})
        assert result.words[0].status == STATUS_MISSPELLED

    def test_invalid_config_raises(self):
        with pytest.raises(ValueError):
            compare('Sonne', 'Sonne', {'keyboardLayout': 'dvorak'})

    def test_none_inputs(self):
        result = compare(None, None)
        assert result.words == ()
        assert result.input_text == ''
        assert result.reference_text == ''

    def test_non_string_input(self):
        result = compare('Seite 42', 42)
        assert result.words[1].status == STATUS_CORRECT


if __name__ == '__main__':
    pytest.main([__file__, '-v', '--tb=short'])
