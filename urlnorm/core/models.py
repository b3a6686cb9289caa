from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ParsedURL:
    """Structured view over a candidate URL.

    Delimiters stay attached to their component (``userinfo`` keeps its
    trailing ``@``, ``port`` its leading ``:``, ``query`` its ``?`` and
    ``fragment`` its ``#``) so reassembly reproduces the input exactly.
    """
    scheme: str
    host: str
    path: str
    userinfo: str = ""
    port: str = ""
    query: str = ""
    fragment: str = ""

    def with_host(self, host: str) -> "ParsedURL":
        return replace(self, host=host)

    def with_path(self, path: str) -> "ParsedURL":
        return replace(self, path=path)

    def to_string(self) -> str:
        return (
            f"{self.scheme}://{self.userinfo}{self.host}{self.port}"
            f"{self.path}{self.query}{self.fragment}"
        )


@dataclass(frozen=True)
class HostBreakdown:
    """Public-suffix split of a hostname."""
    subdomain: str
    domain: str
    suffix: str

    def to_host(self) -> str:
        if not self.subdomain:
            return f"{self.domain}.{self.suffix}"
        return f"{self.subdomain}.{self.domain}.{self.suffix}"
