#!/usr/bin/env python3
"""
recipebox command line interface.

Extracts recipes from websites or AI chat markdown exports into structured
JSON, and builds grocery lists from recipe JSON.
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from .const import DEFAULT_TIMEOUT, ENV_FETCH_TIMEOUT, ENV_LOG_LEVEL
from .extractors.recipe_extractor import RecipeExtractor
from .parsers.markdown_parser import parse_grok_recipe
from .services.grocery_list import build_grocery_list
from .services.ingredient_aggregator import aggregate_ingredients

logger = logging.getLogger(__name__)


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def run_url(args: argparse.Namespace) -> int:
    """Fetch a recipe page and print the parsed recipe."""
    extractor = RecipeExtractor(timeout=args.timeout)
    recipe = extractor.extract_from_url(args.url)

    if recipe is None:
        logger.error("Could not parse recipe from %s", args.url)
        return 1

    if not recipe.ingredients and not recipe.instructions:
        logger.warning("No ingredients or instructions found on %s, result is low confidence", args.url)

    _print_json(recipe.model_dump())
    return 0


def run_markdown(args: argparse.Namespace) -> int:
    """Parse a markdown chat export and print the import result."""
    try:
        markdown = _read_text(args.file)
    except OSError as e:
        logger.error("Cannot read %s: %s", args.file, e)
        return 1

    result = parse_grok_recipe(markdown)
    for warning in result.warnings or []:
        print(f"warning: {warning}", file=sys.stderr)

    _print_json(result.model_dump())
    return 0 if result.success else 1


def run_groceries(args: argparse.Namespace) -> int:
    """Aggregate recipe JSON into a grocery list grouped by category."""
    try:
        recipes = json.loads(_read_text(args.file))
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Cannot load recipes from %s: %s", args.file, e)
        return 1

    if not isinstance(recipes, list):
        logger.error("Expected a JSON list of recipes in %s", args.file)
        return 1

    try:
        aggregated = aggregate_ingredients(recipes)
    except ValidationError as e:
        logger.error("Invalid recipe data in %s: %s", args.file, e)
        return 1

    grocery_list = build_grocery_list(aggregated)
    _print_json({
        category: [item.model_dump() for item in items]
        for category, items in grocery_list.items()
    })
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recipebox",
        description="Extract recipes into structured JSON and build grocery lists"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    url_parser = subparsers.add_parser("url", help="Parse a recipe from a website")
    url_parser.add_argument("url", type=str, help="URL of the recipe website")
    url_parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help=f"Fetch timeout in seconds (default: ${ENV_FETCH_TIMEOUT} or {DEFAULT_TIMEOUT})"
    )
    url_parser.set_defaults(handler=run_url)

    markdown_parser = subparsers.add_parser("markdown", help="Parse an AI chat markdown recipe")
    markdown_parser.add_argument("file", help="Markdown file, or - for stdin")
    markdown_parser.set_defaults(handler=run_markdown)

    groceries_parser = subparsers.add_parser("groceries", help="Build a grocery list")
    groceries_parser.add_argument(
        "file",
        help="JSON list of {title, ingredients, multiplier} objects, or - for stdin"
    )
    groceries_parser.set_defaults(handler=run_groceries)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the recipebox CLI."""
    load_dotenv()

    logging.basicConfig(
        level=getattr(logging, os.getenv(ENV_LOG_LEVEL, "INFO").upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "timeout", DEFAULT_TIMEOUT) is None:
        try:
            args.timeout = float(os.getenv(ENV_FETCH_TIMEOUT, DEFAULT_TIMEOUT))
        except ValueError:
            parser.error(f"{ENV_FETCH_TIMEOUT} must be a number")

    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
