from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from urlnorm.core.models import ParsedURL
from urlnorm.core.parsing import UnnormalizableURL, encode_host, parse_url
from urlnorm.core.rules import DEFAULT_RULES, HostRule, apply_host_rules
from urlnorm.ports.domain_parser import DomainParser


logger = logging.getLogger(__name__)


def normalize_path(path: str) -> str:
    """Collapse origin paths to ``/`` and drop trailing slashes elsewhere."""
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped


class Normalizer:
    """Rewrite single URLs into their canonical form.

    Every call is independent; the only state is the configuration passed at
    construction, so one instance can be shared between threads.
    """
    def __init__(
        self,
        domain_parser: DomainParser,
        default_scheme: str = "http",
        rules: Sequence[HostRule] | None = None,
    ) -> None:
        self.domain_parser = domain_parser
        self.default_scheme = default_scheme.lower()
        self.rules = tuple(DEFAULT_RULES if rules is None else rules)

    def normalize(self, candidate: str) -> str | None:
        """Return the canonical form of ``candidate``.

        Args:
            candidate (str): URL believed to be well formed; the scheme may be
                missing.

        Returns:
            str | None: Canonical URL, or None when the candidate is not a
                valid URL or its host has no public suffix.
        """
        try:
            return self._normalize(candidate).to_string()
        except UnnormalizableURL as exc:
            logger.debug("Dropping %r: %s", candidate, exc)
            return None

    def _normalize(self, candidate: str) -> ParsedURL:
        parsed = parse_url(candidate, self.default_scheme)
        parsed = replace(
            parsed,
            scheme=parsed.scheme.lower(),
            host=encode_host(parsed.host.lower()),
        )

        try:
            breakdown = self.domain_parser.parse_host(parsed.host)
        except Exception as exc:  # collaborator contract violation
            logger.warning("Domain parser failed for %r: %s", parsed.host, exc)
            raise UnnormalizableURL(f"domain parser failed for {parsed.host!r}") from exc
        if not breakdown.suffix:
            raise UnnormalizableURL(f"host {parsed.host!r} has no public suffix")

        host = apply_host_rules(parsed.host, breakdown, self.rules)
        return parsed.with_host(host).with_path(normalize_path(parsed.path))
