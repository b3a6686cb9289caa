from __future__ import annotations

import logging

from urlnorm.adapters.regex_extractor import RegexUrlExtractor
from urlnorm.adapters.tldextract_parser import TldextractDomainParser
from urlnorm.core.batch import BatchDriver
from urlnorm.core.config import NormalizerConfig
from urlnorm.core.normalizer import Normalizer


logger = logging.getLogger(__name__)


def build_normalizer(config: NormalizerConfig | None = None) -> Normalizer:
    """Wire a Normalizer to the tldextract-backed domain parser."""
    config = config or NormalizerConfig()
    logger.debug("Building normalizer with config %s", config.snapshot())
    parser = TldextractDomainParser(
        suffix_list_urls=tuple(config.suffix_list_urls) if config.suffix_list_urls is not None else None,
        cache_dir=config.cache_dir,
        include_psl_private_domains=config.include_psl_private_domains,
        fallback_to_snapshot=config.fallback_to_snapshot,
    )
    return Normalizer(parser, default_scheme=config.default_scheme)


def build_batch_driver(config: NormalizerConfig | None = None) -> BatchDriver:
    """Wire a BatchDriver with the default extraction and domain adapters."""
    config = config or NormalizerConfig()
    return BatchDriver(
        RegexUrlExtractor(schemes=tuple(config.extract_schemes)),
        build_normalizer(config),
        max_workers=config.max_workers,
    )
