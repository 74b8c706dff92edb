"""
validator.py
============
Checks that built selectors actually match elements in an HTML document.
"""

import logfire
from bs4 import BeautifulSoup
from rich.console import Console
from rich.markup import escape
from soupsieve import SelectorSyntaxError

from cssbuilder.builder import SelectorLike


class SelectorValidator:
    """Validates built selectors by running them against HTML with BeautifulSoup.

    Attributes:
        console: Rich console instance for formatted output
        parser: BeautifulSoup parser name

    """

    def __init__(self, console: Console | None = None, parser: str = 'html.parser'):
        self.console = console or Console()
        self.parser = parser

    def _select(self, soup: BeautifulSoup, selector: SelectorLike | str) -> list:
        text = str(selector)
        try:
            return soup.select(text)
        except (SelectorSyntaxError, NotImplementedError) as e:
            # soupsieve raises NotImplementedError for pseudo-elements
            logfire.warn('Selector not supported by soupsieve', selector=text, error=str(e))
            return []

    def count_matches(self, html: str | bytes, selector: SelectorLike | str) -> int:
        """Count the elements a selector matches.

        Args:
            html: HTML document, as text or raw bytes
            selector: Built selector or plain selector string

        Returns:
            Number of matching elements. Selectors soupsieve cannot evaluate
            (bad syntax, pseudo-elements) count as 0.

        """
        soup = BeautifulSoup(html, self.parser)
        return len(self._select(soup, selector))

    def validate_selectors_with_html(
        self,
        html: str,
        selectors: dict[str, SelectorLike],
    ) -> dict[str, SelectorLike] | None:
        """
        Validate a set of named selectors against one HTML document.

        Args:
            html: HTML content to validate against
            selectors: Mapping of name to selector

        Returns:
            Dictionary with only the selectors that matched, or None if none did
        """
        self.console.print(f'  → Validating {len(selectors)} selectors...')

        soup = BeautifulSoup(html, self.parser)
        validated: dict[str, SelectorLike] = {}

        for name, selector in selectors.items():
            matches = self._select(soup, selector)
            if matches:
                self.console.print(f'  ✓ {escape(name)}: {len(matches)} match(es) ({escape(str(selector))})')
                validated[name] = selector
            else:
                self.console.print(f'  ✗ {escape(name)}: no matches ({escape(str(selector))})')

        self.console.print(f'  → Summary: {len(validated)}/{len(selectors)} selectors matched')
        logfire.info('Selectors validated', total=len(selectors), matched=len(validated))

        return validated if validated else None

    def quick_test(self, html: str | bytes, selector: SelectorLike | str) -> bool:
        """
        Quick test if a single selector finds an element with text.

        Args:
            html: HTML to test on
            selector: Selector to test

        Returns:
            True if the first match has non-empty text, False otherwise
        """
        soup = BeautifulSoup(html, self.parser)
        matches = self._select(soup, selector)
        return bool(matches) and bool(matches[0].get_text(strip=True))
