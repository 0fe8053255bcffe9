#!/usr/bin/env python
"""
Print a shopping list from a JSON dump of planned meals.

The input file holds a list of meal occurrences (see
``littlecook.plan.occurrences.occurrence_from_dict`` for the shape).

Run with:
    python scripts/export_shopping_list.py meals.json --users u1 u2 --start 2025-03-03
    python scripts/export_shopping_list.py meals.json --users u1 --preset today --share
"""

import argparse
import json
import os
import sys
from datetime import date
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from littlecook.config import settings
from littlecook.logging_config import configure_logging, get_logger
from littlecook.plan.occurrences import (
    DatePreset,
    ShoppingListQuery,
    occurrence_from_dict,
    resolve_date_range,
)
from littlecook.plan.presenter import export_filename, render_share_text, render_text_export
from littlecook.plan.shopping_list import ShoppingListAggregator

# Configure logging
configure_logging(log_level=os.getenv("LOG_LEVEL", "WARNING"))
logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print a shopping list from planned meals")
    parser.add_argument("meals", type=Path, help="JSON file with a list of meal occurrences")
    parser.add_argument("--users", "-u", nargs="+", default=[], help="Meal user IDs")
    parser.add_argument(
        "--preset",
        "-p",
        choices=[preset.value for preset in DatePreset],
        default=DatePreset.CUSTOM.value,
        help="Period preset (default: custom)",
    )
    parser.add_argument("--start", type=date.fromisoformat, help="First day (YYYY-MM-DD)")
    parser.add_argument("--end", type=date.fromisoformat, help="Last day, default start + 6")
    parser.add_argument("--cook", help="Only meals cooked by this meal user ID")
    parser.add_argument("--share", action="store_true", help="Share text instead of export")
    parser.add_argument("--output", "-o", type=Path, help="Write to this file or directory")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    with args.meals.open(encoding="utf-8") as f:
        occurrences = [occurrence_from_dict(item) for item in json.load(f)]
    logger.info(f"Loaded {len(occurrences)} meal occurrences from {args.meals}")

    preset = DatePreset(args.preset)
    try:
        start, end = resolve_date_range(preset, date.today(), args.start, args.end)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    query = ShoppingListQuery(
        meal_user_ids=tuple(args.users),
        start_date=start,
        end_date=end,
        cook_responsible_id=args.cook,
    )
    items = ShoppingListAggregator(settings.default_category).generate(query, occurrences)

    render = render_share_text if args.share else render_text_export
    text = render(
        items,
        start,
        end,
        title=settings.export_title,
        default_category=settings.default_category,
    )

    if args.output is None:
        print(text)
        return 0

    output = args.output / export_filename(start) if args.output.is_dir() else args.output
    output.write_text(text, encoding="utf-8")
    print(f"Wrote {len(items)} items to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
