#!/usr/bin/env python3
"""
Сравнение диктанта из командной строки v1.2

Режимы:
- Одна пара: эталон и ввод строками, сводка или JSON (--json)
- Пакет (--batch): JSON-список пар {"reference", "input"}, отчёт в JSON (--output)

Настройки по умолчанию берутся из Словари/config.json (секция "comparison"),
флаги командной строки переопределяют их.

Использование:
    python dictation_compare.py "Es gibt viel zu tun" "zu gibt Es tun"
    python dictation_compare.py "Die Sonne scheint" "Die Sone scheint" --json
    python dictation_compare.py --batch ответы.json --output отчёт.json

v1.2 (2026-10-18): Ошибки настроек и чтения пакета пишутся в лог
v1.1 (2026-10-16): Пакетный режим с прогресс-баром
v1.0 (2026-10-07): Начальная версия
"""

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from tqdm import tqdm

from config import load_comparison_config, setup_logging, get_logger, log_exception, RESULTS_DIR
from dictation import ComparisonConfig, ComparisonResult, compare, __version__
from dictation.result import STATUS_CORRECT, STATUS_MISSPELLED, STATUS_MISSING, STATUS_EXTRA

VERSION = '1.2.0'

logger = get_logger(__name__)

STATUS_MARKS = {
    STATUS_CORRECT: '✓',
    STATUS_MISSPELLED: '~',
    STATUS_MISSING: '✗',
    STATUS_EXTRA: '+',
}


# =============================================================================
# ВЫВОД
# =============================================================================

def format_summary(result: ComparisonResult) -> str:
    """Человекочитаемая сводка по одному сравнению."""
    lines = [
        f"Эталон: {result.reference_text}",
        f"Ввод:   {result.input_text}",
        "",
    ]
    for match in result.words:
        expected = match.expected.text if match.expected else ''
        actual = match.actual.text if match.actual else '—'
        lines.append(
            f"  {STATUS_MARKS[match.status]} {expected:<20} {actual:<20} "
            f"{match.status} ({match.similarity:.2f})"
        )
    for match in result.extra_words:
        lines.append(f"  {STATUS_MARKS[STATUS_EXTRA]} {'':<20} {match.actual.text:<20} {STATUS_EXTRA}")

    stats = result.stats
    lines += [
        "",
        f"Верно: {stats.correct}  С ошибкой: {stats.misspelled}  "
        f"Пропущено: {stats.missing}  Лишние: {stats.extra}",
        f"Точность: {stats.accuracy * 100:.1f}%  Схожесть текста: {result.text_similarity * 100:.1f}%",
    ]
    if result.is_complete_match:
        lines.append("✓ Полное совпадение")
    return '\n'.join(lines)


# =============================================================================
# ПАКЕТНЫЙ РЕЖИМ
# =============================================================================

def load_batch(path: Path) -> List[Dict[str, Any]]:
    """
    Читает пары для пакетного сравнения.

    Формат: [{"reference": "...", "input": "..."}, ...]
    или {"items": [...]}.

    Raises:
        ValueError: Файл не содержит списка пар
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get('items')
    if not isinstance(data, list):
        raise ValueError(f"Ожидался список пар reference/input: {path}")

    items = []
    for index, item in enumerate(data):
        if not isinstance(item, dict) or 'reference' not in item:
            logger.warning(f"Пропущен элемент {index}: нет поля reference")
            continue
        items.append(item)
    return items


def run_batch(
    items: List[Dict[str, Any]],
    config: ComparisonConfig,
    show_progress: bool = True,
) -> Dict[str, Any]:
    """
    Сравнивает все пары и считает итоги.

    Returns:
        Отчёт: {"version", "created", "config", "items", "totals"}
    """
    results = []
    totals = {
        'items': 0,
        'complete_matches': 0,
        STATUS_CORRECT: 0,
        STATUS_MISSPELLED: 0,
        STATUS_MISSING: 0,
        STATUS_EXTRA: 0,
        'mean_accuracy': 0.0,
    }

    iterator = tqdm(items, desc="Сравнение", unit="пара", disable=not show_progress)
    for index, item in enumerate(iterator):
        result = compare(item.get('reference'), item.get('input'), config)
        entry = result.to_dict()
        entry['id'] = item.get('id', index)
        results.append(entry)

        totals['items'] += 1
        totals['complete_matches'] += int(result.is_complete_match)
        totals[STATUS_CORRECT] += result.stats.correct
        totals[STATUS_MISSPELLED] += result.stats.misspelled
        totals[STATUS_MISSING] += result.stats.missing
        totals[STATUS_EXTRA] += result.stats.extra
        totals['mean_accuracy'] += result.stats.accuracy

    if totals['items']:
        totals['mean_accuracy'] = round(totals['mean_accuracy'] / totals['items'], 4)

    return {
        'version': __version__,
        'created': datetime.now().isoformat(timespec='seconds'),
        'config': config.to_dict(),
        'items': results,
        'totals': totals,
    }


def save_report(report: Dict[str, Any], output_path: Path) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(report, f, ensure_ascii=False, indent=2)
    return output_path


# =============================================================================
# КОМАНДНАЯ СТРОКА
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Сравнение набранного текста с эталоном диктанта',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Статусы слов:
  ✓ correct     — верно (схожесть >= 0.95)
  ~ misspelled  — с ошибкой (нечёткое совпадение)
  ✗ missing     — пропущено
  + extra       — лишнее

Примеры:
  python dictation_compare.py "Es gibt viel zu tun" "zu gibt Es tun"
  python dictation_compare.py "Der Fuß" "Der FuB" --case-sensitive
  python dictation_compare.py --batch ответы.json --output отчёт.json
        """
    )
    parser.add_argument('reference', nargs='?', help='Эталонное предложение')
    parser.add_argument('input', nargs='?', help='Набранный текст')
    parser.add_argument('--batch', '-b', help='JSON-файл с парами reference/input')
    parser.add_argument('--output', '-o', help='Куда сохранить JSON-отчёт')
    parser.add_argument('--json', action='store_true', help='Вывести результат в JSON')
    parser.add_argument('--config', help='Путь к config.json (по умолчанию Словари/config.json)')

    group = parser.add_argument_group('настройки сравнения')
    group.add_argument('--threshold', '-t', type=float, default=None,
                       help='Минимальный порог схожести 0-1 (по умолчанию 0.3)')
    group.add_argument('--layout', choices=['auto', 'qwertz', 'qwerty', 'azerty'], default=None,
                       help='Раскладка клавиатуры')
    group.add_argument('--case-sensitive', action='store_true', default=None,
                       help='Различать регистр')
    group.add_argument('--no-keyboard', action='store_true',
                       help='Не учитывать соседство клавиш')
    group.add_argument('--no-length-thresholds', action='store_true',
                       help='Не смягчать порог для длинных слов')
    group.add_argument('--no-typo-bonus', action='store_true',
                       help='Без бонуса за типичные опечатки')

    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Уровень логов в консоли')
    parser.add_argument('--no-progress', action='store_true', help='Без прогресс-бара')
    return parser


def config_from_args(args: argparse.Namespace) -> ComparisonConfig:
    """Настройки из config.json + флаги командной строки."""
    overrides = {
        'minimum_match_threshold': args.threshold,
        'keyboard_layout': args.layout,
        'case_sensitive': args.case_sensitive,
        'use_keyboard_proximity': False if args.no_keyboard else None,
        'use_length_based_thresholds': False if args.no_length_thresholds else None,
        'use_typo_pattern_bonus': False if args.no_typo_bonus else None,
    }
    return load_comparison_config(args.config, overrides)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level)

    if not args.batch and args.reference is None:
        parser.error('нужен эталон и ввод, либо --batch ФАЙЛ')

    try:
        config = config_from_args(args)
    except ValueError as e:
        print(f"✗ Ошибка настроек: {e}")
        log_exception(logger, "Невалидные настройки сравнения", e)
        return 2

    if args.batch:
        try:
            items = load_batch(Path(args.batch))
        except (OSError, ValueError) as e:
            print(f"✗ Не удалось прочитать {args.batch}: {e}")
            log_exception(logger, f"Ошибка чтения пакета {args.batch}", e)
            return 1

        report = run_batch(items, config, show_progress=not args.no_progress)
        output = Path(args.output) if args.output else (
            RESULTS_DIR / f"{Path(args.batch).stem}_сравнение.json"
        )
        save_report(report, output)

        totals = report['totals']
        print(f"✓ Сравнено пар: {totals['items']}, полных совпадений: {totals['complete_matches']}")
        print(f"  Средняя точность: {totals['mean_accuracy'] * 100:.1f}%")
        print(f"  Отчёт: {output}")
        return 0

    result = compare(args.reference, args.input or '', config)

    if args.json:
        text = json.dumps(result.to_dict(), ensure_ascii=False, indent=2)
        if args.output:
            save_report(result.to_dict(), Path(args.output))
        print(text)
    else:
        print(format_summary(result))

    return 0


if __name__ == '__main__':
    sys.exit(main())
