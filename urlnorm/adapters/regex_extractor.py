from __future__ import annotations

import re
from dataclasses import dataclass, field

from urlnorm.ports.extractor import ExtractInput


_TRAILING_PUNCTUATION = ".,;:!?'\""
_BRACKETS = {")": "(", "]": "[", "}": "{"}


@dataclass
class RegexUrlExtractor:
    """Find URLs in free text with a scheme or ``www.`` anchored pattern.

    Notes:
        Trailing sentence punctuation and unbalanced closing brackets are
        trimmed so URLs quoted in prose come out clean.
    """
    schemes: tuple[str, ...] = ("http", "https")
    _pattern: re.Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        scheme_group = "|".join(re.escape(scheme) for scheme in self.schemes)
        self._pattern = re.compile(
            rf"(?:\b(?:{scheme_group})://|(?<![\w.@-])www\.)[^\s<>\"'`]+",
            re.IGNORECASE,
        )

    def extract(self, source: ExtractInput) -> list[str]:
        if source is None:
            return []
        if isinstance(source, str):
            return self._extract_text(source)
        urls: list[str] = []
        for item in source:
            if isinstance(item, str):
                urls.extend(self._extract_text(item))
        return urls

    def _extract_text(self, text: str) -> list[str]:
        urls: list[str] = []
        for match in self._pattern.finditer(text):
            url = _trim(match.group(0))
            if url:
                urls.append(url)
        return urls


def _trim(url: str) -> str:
    while url:
        last = url[-1]
        if last in _TRAILING_PUNCTUATION:
            url = url[:-1]
        elif last in _BRACKETS and url.count(last) > url.count(_BRACKETS[last]):
            url = url[:-1]
        else:
            break
    return url
