from __future__ import annotations

from typing import Iterable, Protocol, Union


ExtractInput = Union[str, Iterable[str], None]


class UrlExtractor(Protocol):
    """Boundary for pulling candidate URLs out of free text."""
    def extract(self, source: ExtractInput) -> list[str]:
        """Return candidate URL strings in encounter order.

        Args:
            source (str | Iterable[str] | None): Text, or a sequence of texts
                scanned one after another.

        Returns:
            list[str]: Candidates; empty for no match or empty input. Never
                raises for malformed text.
        """
        ...
