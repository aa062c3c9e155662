"""
Ingredient Line Parser.

This module turns a single free-text ingredient line ("2 cups flour, sifted")
into a structured Ingredient, and converts display amounts ("1 1/2", "3-4",
"½") into numbers for summing grocery lists.
"""
from __future__ import annotations

import logging
import re

from ..models.recipe import Ingredient

_LOGGER = logging.getLogger(__name__)

UNICODE_FRACTIONS = {
    '½': 1 / 2,
    '⅓': 1 / 3,
    '⅔': 2 / 3,
    '¼': 1 / 4,
    '¾': 3 / 4,
    '⅛': 1 / 8,
    '⅜': 3 / 8,
    '⅝': 5 / 8,
    '⅞': 7 / 8,
}
_FRACTION_CHARS = ''.join(UNICODE_FRACTIONS)

# Known units, checked in order against the start of the text after the amount
UNIT_PATTERNS = (
    r'cups?',
    r'tablespoons?', r'tbsps?', r'tbs',
    r'teaspoons?', r'tsps?',
    r'ounces?', r'oz',
    r'pounds?', r'lbs?',
    r'kilograms?', r'kg',
    r'grams?', r'g',
    r'milliliters?', r'ml',
    r'liters?', r'l',
    r'cloves?',
    r'pinch(?:es)?',
    r'dash(?:es)?',
    r'cans?',
    r'packages?', r'pkgs?',
    r'bunch(?:es)?',
    r'stalks?',
    r'slices?',
    r'pieces?',
)

_AMOUNT_RE = re.compile(
    rf"""^(?P<amount>
        (?:[~≈]\s*|about\s+)?
        [\d{_FRACTION_CHARS}]+
        (?:
            [\d{_FRACTION_CHARS}]
          | [./](?=\d)
          | \s*[-–]\s*(?=[\d{_FRACTION_CHARS}])
          | \s+(?=\d+/\d|[{_FRACTION_CHARS}])
        )*
    )
    (?:[-–](?=[^\W\d_]))?   # "12-ounce": hyphen joining amount and unit
    (?=\s|$|[^\W\d_])
    \s*(?P<rest>.*)$""",
    re.IGNORECASE | re.VERBOSE,
)

_UNIT_RE = re.compile(
    rf"^(?P<unit>(?:{'|'.join(UNIT_PATTERNS)})\b\.?)\s*(?P<rest>.*)$",
    re.IGNORECASE,
)

_TRAILING_NOTES_RE = re.compile(r'^(?P<name>.*?)\s*\((?P<notes>[^()]*)\)$')


class IngredientLineParser:
    """Parses one ingredient line into amount, unit, name and notes.

    The web page and chat export pipelines disagree on what a line without
    an amount means, so both behaviours are parameters rather than constants.

    Args:
        default_amount: Amount used when the line has no leading quantity
        split_comma_notes: Move text after the first comma in the name to notes
    """

    def __init__(self, default_amount: str = "", split_comma_notes: bool = False) -> None:
        self.default_amount = default_amount
        self.split_comma_notes = split_comma_notes

    def parse(self, text: str) -> Ingredient | None:
        """Parse an ingredient line.

        Args:
            text: One ingredient line, already stripped of list markers

        Returns:
            Structured Ingredient, or None when no usable name remains
        """
        line = ' '.join((text or '').split())
        if not line:
            return None

        amount = ""
        unit = ""
        rest = line

        match = _AMOUNT_RE.match(line)
        if match:
            amount = match.group('amount')
            rest = match.group('rest')

            unit_match = _UNIT_RE.match(rest)
            # A bare unit with nothing after it ("2 cloves") is the name itself
            if unit_match and unit_match.group('rest'):
                unit = unit_match.group('unit')
                rest = unit_match.group('rest')

        name, notes = self._split_notes(rest)

        if unit:
            name = re.sub(r'^of\s+', '', name, flags=re.IGNORECASE)

        if not name:
            _LOGGER.debug("Discarding ingredient line without a name: '%s'", line)
            return None

        return Ingredient(
            amount=' '.join(amount.split()) if amount else self.default_amount,
            unit=unit.strip().rstrip(',.').strip(),
            name=name,
            notes=notes,
        )

    def _split_notes(self, text: str) -> tuple[str, str | None]:
        """Separate a trailing parenthetical (and optionally a comma clause) from the name."""
        name = text.strip()
        notes = []

        match = _TRAILING_NOTES_RE.match(name)
        if match:
            name = match.group('name').strip()
            if match.group('notes').strip():
                notes.append(match.group('notes').strip())

        if self.split_comma_notes and ',' in name:
            name, _, extra = name.partition(',')
            name = name.strip()
            if extra.strip():
                notes.insert(0, extra.strip())

        return name.strip(' ,'), ', '.join(notes) or None


URL_INGREDIENT_PARSER = IngredientLineParser(default_amount="", split_comma_notes=True)
MARKDOWN_INGREDIENT_PARSER = IngredientLineParser(default_amount="1", split_comma_notes=False)


def parse_ingredient_line(text: str) -> Ingredient | None:
    """Parse an ingredient line the way web page ingredients are parsed."""
    return URL_INGREDIENT_PARSER.parse(text)


def _parse_fraction(part: str) -> float:
    """Read one amount token: '3', '0.5' or '3/4'.

    Raises ValueError or ZeroDivisionError on malformed tokens.
    """
    numerator, slash, denominator = part.partition('/')
    if not slash:
        return float(part)
    if not denominator or '/' in denominator:
        raise ValueError(f"Malformed fraction in amount: {part}")
    return float(numerator) / float(denominator)


def _apply_unicode_fractions(text: str) -> str:
    """Replace unicode fraction characters with decimal equivalents.

    Mixed numbers are added up: 2½ -> 2.5, standalone ½ -> 0.5.
    """
    for fraction_char, decimal_value in UNICODE_FRACTIONS.items():
        pattern = rf'(\d+){re.escape(fraction_char)}'

        def replace_mixed(match, value=decimal_value):
            return str(int(match.group(1)) + value)

        text = re.sub(pattern, replace_mixed, text)
        text = text.replace(fraction_char, f" {decimal_value}")

    return text


def parse_quantity(quantity_str: str | None) -> float | None:
    """Parse a display amount into a number.

    Handles '2', '2.5', '1/2', '1 1/2', '½', '2½', '~2' and ranges such as
    '3-4', where the upper bound is used.

    Args:
        quantity_str: The display amount

    Returns:
        Parsed float value or None if nothing numeric could be read
    """
    if not quantity_str:
        return None

    text = _apply_unicode_fractions(quantity_str)
    text = re.sub(r'[^\d./\-–\s]', ' ', text).strip()
    if not text:
        return None

    # Ranges count at their upper bound, not with the hyphen stripped ("3-4" is 4, never 34)
    segments = [segment for segment in re.split(r'\s*[-–]\s*', text) if segment.strip()]
    upper = segments[-1] if segments else ''
    try:
        parts = upper.split()
        if not parts:
            return None
        return sum(_parse_fraction(part) for part in parts)
    except (ValueError, ZeroDivisionError) as e:
        _LOGGER.debug("Failed to parse quantity '%s': %s", quantity_str, e)
        return None


def quantity_to_number(quantity_str: str | None) -> float:
    """Like parse_quantity, but malformed or empty amounts count as 0."""
    value = parse_quantity(quantity_str)
    return value if value is not None else 0.0
