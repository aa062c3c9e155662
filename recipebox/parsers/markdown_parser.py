"""
Markdown Chat-Export Recipe Parser.

This module extracts a recipe from the semi-structured markdown that AI chat
assistants produce when asked for a recipe (a bold title, an intro paragraph,
"Ingredients" and "Instructions" sections, tips). Heading styles, bolding and
bullet glyphs vary between answers, so the scanner matches keywords
permissively and reports doubtful input as warnings instead of failing.
"""
from __future__ import annotations

import enum
import logging
import re

from ..const import (
    DEFAULT_SERVINGS,
    MIN_BOLD_TITLE_LENGTH,
    MIN_NOTES_LENGTH,
    MIN_PLAIN_TITLE_LENGTH,
)
from ..models.recipe import ImportedRecipe, ImportResult, Ingredient
from .duration_parser import parse_duration
from .ingredient_parser import MARKDOWN_INGREDIENT_PARSER, IngredientLineParser

_LOGGER = logging.getLogger(__name__)

ERROR_NO_CONTENT = "No content provided"
ERROR_NO_TITLE = "Could not detect recipe title"
ERROR_INCOMPLETE = "Incomplete recipe: missing key sections (ingredients or instructions)"

WARNING_NO_INGREDIENTS = "No ingredients were parsed, check the markdown format"
WARNING_NO_INSTRUCTIONS = "No instructions were parsed, check the markdown format"
WARNING_INTRO_AS_NOTES = "No separate tips/notes section found, used intro paragraph as notes"

# Lines longer than this are prose, not section headers (unless marked with '#')
MAX_HEADER_LENGTH = 60


class Section(enum.Enum):
    """Which part of the document the scanner is in."""

    NONE = "none"
    INGREDIENTS = "ingredients"
    INSTRUCTIONS = "instructions"
    NOTES = "notes"


# Header keywords, checked in order (first match wins)
SECTION_HEADERS = (
    (re.compile(r'ingredients'), Section.INGREDIENTS),
    (re.compile(r'instructions|directions|method|step-by-step|full steps?'
                r'|^(?:#+\s*|\*\*)[^\n]*\bsteps?\b|^steps?\b'), Section.INSTRUCTIONS),
    (re.compile(r'tips|notes|success|suggestions|\bserve\b'), Section.NOTES),
)

_YOUTUBE_URL_RE = re.compile(
    r'https?://(?:www\.|m\.)?(?:youtube\.com|youtu\.be)/[^\s)\]>]+', re.IGNORECASE)
_BOLD_RE = re.compile(r'\*\*(.+?)\*\*')
_LIST_ITEM_RE = re.compile(r'^(?:[-•]\s*|\*\s+|\+\s+|\d+[.)]\s+)(?P<body>.*)$')
_SUBHEADING_RE = re.compile(r'^\*\*(?P<label>[^*]+?):?\*\*:?$')
_STEP_LABEL_RE = re.compile(r'^\*\*(?P<label>.+?)(?::\*\*|\*\*:)\s*')
_SERVINGS_HINT_RE = re.compile(r'serves|makes about|serving')
_SERVINGS_NUMBER_RE = re.compile(r'(\d+)\s*(?:-|–|to)\s*(\d+)|(\d+)')
_TIME_RE = re.compile(
    r'\b(?P<kind>prep(?:aration)?|active|cook(?:ing)?|bak(?:e|ing)|roast(?:ing)?|total)'
    r'\s*(?:time)?\s*[:~\-]?\s*'
    r'(?P<duration>(?:about\s+|approx\.?\s+|roughly\s+|[~≈]\s*)?'
    r'\d+(?:\.\d+)?(?:\s*[-–]\s*\d+)?\s*(?:hours?|hrs?|minutes?|mins?)\b'
    r'(?:\s*(?:and\s+)?\d+\s*(?:minutes?|mins?)\b)?)',
    re.IGNORECASE,
)

PREP_TIME_KINDS = ('prep', 'active')
# "total" lands in cook_time as a simplification
COOK_TIME_KINDS = ('cook', 'bak', 'roast', 'total')


def match_section(line: str) -> Section | None:
    """Return the section a header line opens, or None for content lines."""
    if _LIST_ITEM_RE.match(line):
        return None
    if len(line) > MAX_HEADER_LENGTH and not line.startswith('#'):
        return None

    lower = line.lower()
    for pattern, section in SECTION_HEADERS:
        if pattern.search(lower):
            return section
    return None


def _clean_title(text: str) -> str:
    title = text.strip().lstrip('#').strip()
    title = re.sub(r'^["\'“”]+|["\'“”]+$', '', title).strip()
    return re.sub(r'\.$', '', title).strip()


def _is_markup_line(line: str) -> bool:
    return line.startswith(('**', '#'))


class _MarkdownScan:
    """Mutable state for one left-to-right pass over the document lines."""

    def __init__(self, ingredient_parser: IngredientLineParser) -> None:
        self.ingredient_parser = ingredient_parser
        self.section = Section.NONE
        self.title = ""
        self.source_url: str | None = None
        self.servings = DEFAULT_SERVINGS
        self.prep_time: int | None = None
        self.cook_time: int | None = None
        self.notes: str | None = None
        self.ingredients: list[Ingredient] = []
        self.instructions: list[str] = []
        self.intro_lines: list[str] = []
        self.warnings: list[str] = []
        self.current_ingredient: Ingredient | None = None
        self.title_candidate: str | None = None
        self.title_candidate_line: str | None = None

    def feed(self, line: str) -> None:
        lower = line.lower()
        header = match_section(line)

        self._detect_source_url(line)

        if not self.title and self._detect_title(line, lower, header):
            return

        if self.section is Section.NONE and header is None:
            self.intro_lines.append(line)

        self._detect_servings(lower)
        self._detect_times(line)

        if header is not None:
            _LOGGER.debug("Entering %s section at '%s'", header.value, line)
            self._promote_title_candidate()
            self.section = header
            if header is Section.NOTES and self.notes is None:
                self.notes = ""
            return

        if self.section is Section.INGREDIENTS:
            self._handle_ingredient_line(line)
        elif self.section is Section.INSTRUCTIONS:
            self._handle_instruction_line(line)
        elif self.section is Section.NOTES:
            self._handle_notes_line(line)

    def _detect_source_url(self, line: str) -> None:
        if self.source_url:
            return
        match = _YOUTUBE_URL_RE.search(line)
        if match:
            self.source_url = match.group(0).rstrip(').,;')

    def _detect_title(self, line: str, lower: str, header: Section | None) -> bool:
        """Capture the title; returns True when the line is fully consumed.

        A bold span in the intro beats an earlier plain line, which is only
        kept as a candidate until the first section header.
        """
        if header is not None or _LIST_ITEM_RE.match(line):
            return False

        bold = _BOLD_RE.search(line)
        if bold and (self.section is Section.NONE or self.title_candidate is None):
            text = bold.group(1).strip()
            if len(text) > MIN_BOLD_TITLE_LENGTH and 'channel' not in text.lower():
                self.title = _clean_title(text)
                _LOGGER.debug("Title from bold text: '%s'", self.title)
                return True

        if (self.section is Section.NONE
                and self.title_candidate is None
                and len(line) > MIN_PLAIN_TITLE_LENGTH
                and not line.startswith(('-', '*'))
                and 'serves' not in lower):
            self.title_candidate = _clean_title(line)
            self.title_candidate_line = line
            _LOGGER.debug("Title candidate from first long line: '%s'", self.title_candidate)
        return False

    def _promote_title_candidate(self) -> None:
        if self.title or not self.title_candidate:
            return
        self.title = self.title_candidate
        if self.title_candidate_line in self.intro_lines:
            self.intro_lines.remove(self.title_candidate_line)

    def _detect_servings(self, lower: str) -> None:
        if not _SERVINGS_HINT_RE.search(lower):
            return
        match = _SERVINGS_NUMBER_RE.search(lower)
        if not match:
            return
        servings = int(match.group(2) or match.group(3))
        if servings > 0:
            self.servings = servings

    def _detect_times(self, line: str) -> None:
        for match in _TIME_RE.finditer(line):
            minutes = parse_duration(match.group('duration'))
            if minutes is None:
                continue

            kind = match.group('kind').lower()
            if kind.startswith(PREP_TIME_KINDS) and self.prep_time is None:
                self.prep_time = minutes
            elif kind.startswith(COOK_TIME_KINDS) and self.cook_time is None:
                self.cook_time = minutes

    def _handle_ingredient_line(self, line: str) -> None:
        subheading = _SUBHEADING_RE.match(line)
        if subheading or line.startswith('#'):
            label = subheading.group('label').strip() if subheading else line.lstrip('#').strip()
            self.warnings.append(
                f'Detected subheading: "{label}", following ingredients are not grouped under it')
            return

        item = _LIST_ITEM_RE.match(line)
        if item:
            body = item.group('body').replace('**', '').strip()
            ingredient = self.ingredient_parser.parse(body) if body else None
            if ingredient:
                self.ingredients.append(ingredient)
                self.current_ingredient = ingredient
            return

        if self.current_ingredient is not None and not _is_markup_line(line):
            ingredient = self.current_ingredient
            ingredient.notes = f"{ingredient.notes} {line}" if ingredient.notes else line

    def _handle_instruction_line(self, line: str) -> None:
        item = _LIST_ITEM_RE.match(line)
        if item:
            step = _STEP_LABEL_RE.sub(lambda m: f"{m.group('label').strip()}: ", item.group('body').strip())
            if step.strip():
                self.instructions.append(step.strip())
            return

        if self.instructions and not _is_markup_line(line):
            self.instructions[-1] = f"{self.instructions[-1]} {line}"

    def _handle_notes_line(self, line: str) -> None:
        if _is_markup_line(line):
            return
        self.notes = f"{self.notes}\n{line}" if self.notes else line

    def finish(self) -> ImportResult:
        self._promote_title_candidate()
        if not self.title:
            _LOGGER.warning("Markdown import failed: no title detected")
            return ImportResult(error=ERROR_NO_TITLE)

        notes = (self.notes or "").strip()
        if self.intro_lines and len(notes) < MIN_NOTES_LENGTH:
            notes = '\n'.join(self.intro_lines).strip()
            self.warnings.append(WARNING_INTRO_AS_NOTES)

        if not self.ingredients:
            self.warnings.append(WARNING_NO_INGREDIENTS)
        if not self.instructions:
            self.warnings.append(WARNING_NO_INSTRUCTIONS)

        warnings = list(self.warnings) or None

        if not self.ingredients or not self.instructions:
            _LOGGER.warning("Markdown import of '%s' is incomplete (%d ingredients, %d steps)",
                            self.title, len(self.ingredients), len(self.instructions))
            return ImportResult(error=ERROR_INCOMPLETE, warnings=warnings)

        recipe = ImportedRecipe(
            title=self.title,
            source_url=self.source_url,
            ingredients=self.ingredients,
            instructions=self.instructions,
            servings=self.servings,
            prep_time=self.prep_time,
            cook_time=self.cook_time,
            notes=notes or None,
        )
        _LOGGER.info("Imported recipe '%s' from markdown with %d ingredients and %d steps",
                     recipe.title, len(recipe.ingredients), len(recipe.instructions))
        return ImportResult(recipe=recipe, warnings=warnings)


class MarkdownRecipeParser:
    """Parses AI chat markdown exports into ImportResult objects.

    Args:
        ingredient_parser: Line parser for ingredient bullets; defaults to the
            chat export flavour, where a missing amount means "1"
    """

    def __init__(self, ingredient_parser: IngredientLineParser | None = None) -> None:
        self.ingredient_parser = ingredient_parser or MARKDOWN_INGREDIENT_PARSER

    def parse_recipe(self, markdown: str) -> ImportResult:
        """Parse a markdown recipe.

        Args:
            markdown: The raw markdown text

        Returns:
            ImportResult holding the recipe and warnings, or an error message
        """
        if not markdown or not markdown.strip():
            return ImportResult(error=ERROR_NO_CONTENT)

        scan = _MarkdownScan(self.ingredient_parser)
        for raw_line in markdown.splitlines():
            line = raw_line.strip()
            if line:
                scan.feed(line)
        return scan.finish()


def parse_grok_recipe(markdown: str) -> ImportResult:
    """Parse a recipe exported from an AI chat (e.g. Grok) as markdown."""
    return MarkdownRecipeParser().parse_recipe(markdown)
