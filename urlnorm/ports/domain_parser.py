from __future__ import annotations

from typing import Protocol

from urlnorm.core.models import HostBreakdown


class DomainParser(Protocol):
    """Public-suffix boundary used to split hostnames."""
    def parse_host(self, host: str) -> HostBreakdown:
        """Split a hostname into subdomain, registrable domain and suffix.

        Args:
            host (str): Lowercased, ASCII (IDNA-encoded) hostname.

        Returns:
            HostBreakdown: Breakdown with an empty suffix when the host has
                no recognizable public suffix.
        """
        ...
