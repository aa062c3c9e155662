"""
Recipe extraction from web pages.

This module orchestrates URL based extraction: fetch the page once, read
schema.org JSON-LD when the page has it, and fall back to markup heuristics
when it does not.
"""
from __future__ import annotations

import logging

import requests
from bs4 import BeautifulSoup

from ..const import DEFAULT_TIMEOUT
from ..models.recipe import ParsedRecipe
from ..parsers.html_parser import HTMLFallbackParser
from ..parsers.jsonld_parser import JSONLDRecipeParser
from .scraper import fetch_page_html

_LOGGER = logging.getLogger(__name__)


class RecipeExtractor:
    """Extracts a ParsedRecipe from recipe web pages."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, session: requests.Session | None = None) -> None:
        """Initialize the recipe extractor.

        Args:
            timeout: Timeout in seconds for the page fetch
            session: Optional HTTP session; a cloudscraper session is created per fetch otherwise
        """
        self.timeout = timeout
        self.session = session
        self.jsonld_parser = JSONLDRecipeParser()
        self.fallback_parser = HTMLFallbackParser()

    def extract_from_html(self, html: str) -> ParsedRecipe:
        """Extract a recipe from page HTML.

        Never fails: a page without JSON-LD or recognisable markup yields a
        recipe with empty ingredient and instruction lists, which callers
        should treat as low confidence.
        """
        soup = BeautifulSoup(html or "", features="html.parser")

        recipe = self.jsonld_parser.parse_document(soup)
        if recipe is not None:
            _LOGGER.info("Using JSON-LD structured data")
            return recipe

        _LOGGER.info("No JSON-LD recipe found, using HTML heuristics")
        return self.fallback_parser.parse_document(soup)

    def extract_from_url(self, url: str) -> ParsedRecipe | None:
        """Fetch a URL and extract its recipe.

        Returns:
            The recipe, or None if fetching or parsing failed for any reason
        """
        try:
            html = fetch_page_html(url, timeout=self.timeout, session=self.session)
            recipe = self.extract_from_html(html)
        except Exception as e:
            _LOGGER.error("Error extracting recipe from %s: %s", url, e, exc_info=True)
            return None

        _LOGGER.info("Extracted recipe '%s' with %d ingredients from %s",
                     recipe.title, len(recipe.ingredients), url)
        return recipe


def parse_recipe_from_html(html: str) -> ParsedRecipe:
    """Parse recipe page HTML into a ParsedRecipe (JSON-LD first, then heuristics)."""
    return RecipeExtractor().extract_from_html(html)


def parse_recipe_from_url(url: str, timeout: float = DEFAULT_TIMEOUT) -> ParsedRecipe | None:
    """Fetch and parse a recipe page, returning None on any failure."""
    return RecipeExtractor(timeout=timeout).extract_from_url(url)
