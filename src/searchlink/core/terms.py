"""Term processor — Turns raw user input into Lucene query-string syntax.

Default-format terms (no explicit field selector) are made fuzzy token by
token and scoped to the default field::

    >>> TermProcessor().normalize("  cat dog  ")
    'name:cat~ dog~'
    >>> TermProcessor().normalize('type:foo')
    'type:foo'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)

FUZZY_MARKER = "~"
QUOTE = '"'


class TermProcessor:
    """Normalizes raw search terms for the backend.

    Args:
        default_field: Field searched when the term names none.
        selector_fields: Fields whose ``field:`` selector marks a term as
            explicitly targeted; such terms pass through unchanged.
        edit_distance: Edit distance appended after the fuzziness marker.
            ``None`` leaves the distance to the backend default.
    """

    def __init__(
        self,
        default_field: str = "name",
        selector_fields: Iterable[str] = ("name", "type"),
        edit_distance: int | None = None,
    ) -> None:
        self.default_field = default_field
        self.selectors = tuple(f"{field}:" for field in selector_fields)
        self.edit_distance = edit_distance

    def is_default_format(self, term: str) -> bool:
        """Return True if the term carries no explicit field selector."""
        return not any(selector in term for selector in self.selectors)

    def add_fuzziness(self, term: str, edit_distance: int | None = None) -> str:
        """Append the fuzziness marker to every token outside a quoted phrase.

        Tokens from an opening quote through its closing quote are left as
        they are; an unclosed quote protects the rest of the term.
        """
        distance = "" if edit_distance is None else str(edit_distance)
        tokens: list[str] = []
        in_phrase = False
        for token in term.split():
            quotes = token.count(QUOTE)
            if quotes or in_phrase:
                tokens.append(token)
            else:
                tokens.append(f"{token}{FUZZY_MARKER}{distance}")
            if quotes % 2:
                in_phrase = not in_phrase
        return " ".join(tokens)

    def normalize(self, raw: str) -> str:
        """Normalize a raw term into a backend query string.

        Args:
            raw: Raw user input, possibly empty or padded.

        Returns:
            The processed query; empty when the input holds no token.
        """
        term = (raw or "").strip()
        if not term:
            return ""

        if self.is_default_format(term):
            term = self.add_fuzziness(term, self.edit_distance)
            term = f"{self.default_field}:{term}"

        logger.debug("Processed search term %r -> %r", raw, term)
        return term
