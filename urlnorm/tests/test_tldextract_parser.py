import logging

import pytest

from urlnorm.adapters.factory import build_batch_driver, build_normalizer
from urlnorm.adapters.tldextract_parser import TldextractDomainParser
from urlnorm.core.config import NormalizerConfig
from urlnorm.core.models import HostBreakdown


# Bundled public-suffix snapshot only; no network access.
OFFLINE = NormalizerConfig(suffix_list_urls=[], cache_dir=None)


@pytest.fixture(scope="module")
def parser() -> TldextractDomainParser:
    return TldextractDomainParser(suffix_list_urls=())


@pytest.mark.parametrize(
    "host, expected",
    [
        ("twingly.com", HostBreakdown("", "twingly", "com")),
        ("blog.twingly.com", HostBreakdown("blog", "twingly", "com")),
        ("www.jlchen1026.blogspot.co.uk", HostBreakdown("www.jlchen1026", "blogspot", "co.uk")),
        ("example.xn--p1ai", HostBreakdown("", "example", "xn--p1ai")),
    ],
)
def test_parse_host(parser: TldextractDomainParser, host: str, expected: HostBreakdown) -> None:
    assert parser.parse_host(host) == expected


def test_parse_host_without_suffix(parser: TldextractDomainParser) -> None:
    assert parser.parse_host("localhost").suffix == ""


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("http://twingly.com/", "http://www.twingly.com/"),
        ("http://WWW.jlchen1026.blogspot.CO.UK/", "http://jlchen1026.blogspot.com/"),
        ("http://jlchen1026.blogspot.se/", "http://jlchen1026.blogspot.com/"),
        ("http://www.åäö.se/", "http://www.xn--4cab6c.se/"),
        ("http://bbc.co.uk/news/", "http://www.bbc.co.uk/news"),
        ("http://www..twingly..com/", "http://www..twingly..com/"),
    ],
)
def test_normalize_with_public_suffix_list(raw: str, expected: str) -> None:
    assert build_normalizer(OFFLINE).normalize(raw) == expected


def test_normalize_all_with_default_adapters() -> None:
    text = "Visit http://twingly.com/ and http://www.twingly. or WWW.jlchen1026.blogspot.CO.UK/."
    assert build_batch_driver(OFFLINE).normalize_all(text) == [
        "http://www.twingly.com/",
        "http://jlchen1026.blogspot.com/",
    ]


def test_build_normalizer_logs_config_snapshot(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="urlnorm.adapters.factory"):
        build_normalizer(OFFLINE)
    assert "'default_scheme': 'http'" in caplog.text
    assert "'suffix_list_urls': []" in caplog.text
