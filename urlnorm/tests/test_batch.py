import pytest

from urlnorm.core.batch import BatchDriver
from urlnorm.core.normalizer import Normalizer
from urlnorm.tests.fakes import FakeDomainParser, ListExtractor


@pytest.fixture
def driver() -> BatchDriver:
    return BatchDriver(ListExtractor(), Normalizer(FakeDomainParser()))


def test_normalize_all_preserves_order(driver: BatchDriver) -> None:
    text = "http://twingly.com/ http://blog.twingly.com/"
    assert driver.normalize_all(text) == ["http://www.twingly.com/", "http://blog.twingly.com/"]


def test_normalize_all_drops_unnormalizable_and_keeps_relative_order(driver: BatchDriver) -> None:
    urls = ["http://b.twingly.com/", "http://www.twingly.", "http://a.twingly.com/"]
    assert driver.normalize_all(urls) == ["http://b.twingly.com/", "http://a.twingly.com/"]


def test_normalize_all_does_not_deduplicate(driver: BatchDriver) -> None:
    urls = ["http://twingly.com/", "http://www.twingly.com"]
    assert driver.normalize_all(urls) == ["http://www.twingly.com/", "http://www.twingly.com/"]


@pytest.mark.parametrize("source", [None, "", []])
def test_normalize_all_accepts_empty_input(driver: BatchDriver, source) -> None:
    assert driver.normalize_all(source) == []


def test_normalize_all_passes_each_candidate_to_normalizer() -> None:
    seen: list[str] = []

    class RecordingNormalizer:
        def normalize(self, candidate: str) -> str:
            seen.append(candidate)
            return candidate

    urls = ["http://blog.twingly.com/", "http://twingly.com/"]
    BatchDriver(ListExtractor(), RecordingNormalizer()).normalize_all(" ".join(urls))
    assert seen == urls


def test_parallel_mapping_keeps_order() -> None:
    urls = [f"http://host{index}.twingly.com/path{index}/" for index in range(50)]
    driver = BatchDriver(ListExtractor(), Normalizer(FakeDomainParser()), max_workers=8)
    assert driver.normalize_all(urls) == [url.rstrip("/") for url in urls]


def test_max_workers_must_be_positive() -> None:
    with pytest.raises(ValueError):
        BatchDriver(ListExtractor(), Normalizer(FakeDomainParser()), max_workers=0)


def test_extract_urls_returns_list(driver: BatchDriver) -> None:
    assert driver.extract_urls(None) == []
    assert driver.extract_urls(("http://a.com", "http://b.com")) == ["http://a.com", "http://b.com"]
