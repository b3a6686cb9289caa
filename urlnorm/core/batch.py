from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from urlnorm.core.normalizer import Normalizer
from urlnorm.ports.extractor import ExtractInput, UrlExtractor


logger = logging.getLogger(__name__)


class BatchDriver:
    """Extract candidate URLs from input and normalize each of them.

    Output keeps extraction order. Duplicates are kept and candidates that
    cannot be normalized are dropped silently.
    """
    def __init__(self, extractor: UrlExtractor, normalizer: Normalizer, max_workers: int = 1) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        self.extractor = extractor
        self.normalizer = normalizer
        self.max_workers = max_workers

    def extract_urls(self, source: ExtractInput) -> list[str]:
        return list(self.extractor.extract(source))

    def normalize_all(self, source: ExtractInput) -> list[str]:
        """Normalize every URL found in ``source``.

        Args:
            source (str | Iterable[str] | None): Free text or a sequence of
                strings.

        Returns:
            list[str]: Canonical URLs in encounter order.
        """
        candidates = self.extract_urls(source)
        if self.max_workers > 1 and len(candidates) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                results = list(pool.map(self.normalizer.normalize, candidates))
        else:
            results = [self.normalizer.normalize(candidate) for candidate in candidates]

        normalized = [url for url in results if url is not None]
        dropped = len(candidates) - len(normalized)
        if dropped:
            logger.debug("Dropped %d of %d candidate URLs", dropped, len(candidates))
        return normalized
