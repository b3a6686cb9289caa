from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import tldextract

from urlnorm.core.models import HostBreakdown


@dataclass
class TldextractDomainParser:
    """Domain parser backed by the public-suffix list via tldextract.

    Notes:
        Private PSL entries are excluded by default. With them, hosts such as
        ``foo.blogspot.com`` would report ``blogspot.com`` as the suffix and
        the blogspot rewrite could never see ``blogspot`` as the domain.
    """
    suffix_list_urls: tuple[str, ...] | None = None
    cache_dir: str | None = None
    include_psl_private_domains: bool = False
    fallback_to_snapshot: bool = True
    _extractor: Any = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        kwargs: dict[str, Any] = {
            "include_psl_private_domains": self.include_psl_private_domains,
            "fallback_to_snapshot": self.fallback_to_snapshot,
        }
        if self.suffix_list_urls is not None:
            kwargs["suffix_list_urls"] = tuple(self.suffix_list_urls)
        if self.cache_dir is not None:
            kwargs["cache_dir"] = self.cache_dir
        self._extractor = tldextract.TLDExtract(**kwargs)

    def parse_host(self, host: str) -> HostBreakdown:
        result = self._extractor(host)
        return HostBreakdown(
            subdomain=result.subdomain,
            domain=result.domain,
            suffix=result.suffix,
        )
