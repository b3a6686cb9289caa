from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

from urlnorm.core.models import HostBreakdown


logger = logging.getLogger(__name__)


class HostRule(Protocol):
    """Predicate/rewrite pair applied to a host breakdown."""
    name: str

    def matches(self, breakdown: HostBreakdown) -> bool:
        ...

    def rewrite(self, host: str, breakdown: HostBreakdown) -> str:
        ...


@dataclass(frozen=True)
class BlogspotRule:
    """Collapse every blogspot country domain onto ``blogspot.com``.

    Leading ``www`` labels are dropped; the rest of the subdomain is kept.
    """
    name: str = "blogspot"
    domain: str = "blogspot"
    canonical_suffix: str = "com"

    def matches(self, breakdown: HostBreakdown) -> bool:
        return breakdown.domain == self.domain

    def rewrite(self, host: str, breakdown: HostBreakdown) -> str:
        labels = breakdown.subdomain.split(".") if breakdown.subdomain else []
        while labels and labels[0] == "www":
            labels.pop(0)
        subdomain = ".".join(labels)
        return HostBreakdown(subdomain, breakdown.domain, self.canonical_suffix).to_host()


@dataclass(frozen=True)
class WwwPrefixRule:
    """Prefix bare registrable domains with ``www.``."""
    name: str = "www"
    prefix: str = "www"

    def matches(self, breakdown: HostBreakdown) -> bool:
        return not breakdown.subdomain

    def rewrite(self, host: str, breakdown: HostBreakdown) -> str:
        return f"{self.prefix}.{host}"


DEFAULT_RULES: tuple[HostRule, ...] = (BlogspotRule(), WwwPrefixRule())


def apply_host_rules(host: str, breakdown: HostBreakdown, rules: Sequence[HostRule]) -> str:
    """Rewrite ``host`` with the first matching rule.

    Rules are evaluated in order and at most one applies, so earlier rules
    take precedence (blogspot hosts never get a ``www`` prefix).
    """
    for rule in rules:
        if rule.matches(breakdown):
            rewritten = rule.rewrite(host, breakdown)
            logger.debug("Rule %s rewrote host %r to %r", rule.name, host, rewritten)
            return rewritten
    return host
