"""
Base Recipe Parser.

This module defines the base interface that web page recipe parsers implement.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from bs4 import BeautifulSoup

from ..models.recipe import ParsedRecipe


class BaseRecipeParser(ABC):
    """Abstract base class for web page recipe parsers.

    Subclasses implement parse_document against an already parsed page, so
    a caller trying several parsers only has to parse the HTML once.
    """

    @abstractmethod
    def parse_document(self, soup: BeautifulSoup) -> ParsedRecipe | None:
        """Parse recipe information from a parsed HTML document.

        Args:
            soup: The parsed page

        Returns:
            A ParsedRecipe, or None if this parser found nothing
        """

    def parse_recipe(self, text: str) -> ParsedRecipe | None:
        """Parse recipe information from raw HTML.

        Args:
            text: The raw page HTML

        Returns:
            A ParsedRecipe, or None if this parser found nothing
        """
        return self.parse_document(BeautifulSoup(text or "", features="html.parser"))
