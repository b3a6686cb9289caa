from __future__ import annotations

"""urlnorm command-line interface entrypoint."""

import argparse
import json
import logging
import os
import sys

from jsonschema import ValidationError

from urlnorm.adapters.factory import build_batch_driver
from urlnorm.core.batch import BatchDriver
from urlnorm.core.config import NormalizerConfig
from urlnorm.core.version import get_urlnorm_version


def _read_sources(args: argparse.Namespace) -> list[str]:
    """Collect input texts from arguments, --file, or stdin.

    Notes:
        stdin is only read when neither positional text nor --file is given,
        so the command stays usable in pipelines.
    """
    sources: list[str] = list(args.text or [])
    if args.file:
        with open(args.file, "r", encoding="utf-8") as handle:
            sources.append(handle.read())
    if not sources:
        sources.append(sys.stdin.read())
    return sources


def _load_config(args: argparse.Namespace) -> NormalizerConfig:
    """Load the config file named by --config or URLNORM_CONFIG, if any."""
    path = args.config or os.environ.get("URLNORM_CONFIG")
    config = NormalizerConfig.from_file(path) if path else NormalizerConfig()
    if args.max_workers is not None:
        config.max_workers = args.max_workers
    return config


def _emit(urls: list[str], as_json: bool) -> None:
    if as_json:
        print(json.dumps(urls, ensure_ascii=False))
        return
    for url in urls:
        print(url)


def _build_driver(args: argparse.Namespace) -> BatchDriver:
    return build_batch_driver(_load_config(args))


def normalize_command(args: argparse.Namespace) -> int:
    """Print the canonical form of every URL found in the input."""
    try:
        driver = _build_driver(args)
        sources = _read_sources(args)
    except (OSError, ValueError, ValidationError) as exc:
        print(str(exc), file=sys.stderr)
        return 2
    _emit(driver.normalize_all(sources), args.json)
    return 0


def extract_command(args: argparse.Namespace) -> int:
    """Print candidate URLs found in the input without normalizing them."""
    try:
        driver = _build_driver(args)
        sources = _read_sources(args)
    except (OSError, ValueError, ValidationError) as exc:
        print(str(exc), file=sys.stderr)
        return 2
    _emit(driver.extract_urls(sources), args.json)
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("text", nargs="*", help="Text to scan for URLs (reads stdin when omitted)")
    parser.add_argument("--file", default=None, help="Read text to scan from a file")
    parser.add_argument("--config", default=None, help="Path to urlnorm.yaml or .json")
    parser.add_argument("--max-workers", type=int, default=None, help="Normalize URLs in parallel")
    parser.add_argument("--json", action="store_true", help="Print a JSON array instead of lines")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint and command registration."""
    parser = argparse.ArgumentParser(prog="urlnorm")
    parser.add_argument("--version", action="version", version=f"urlnorm {get_urlnorm_version()}")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("URLNORM_LOG_LEVEL", "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (stderr)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    normalize_parser = subparsers.add_parser("normalize", help="Print canonical URLs found in text")
    _add_common_arguments(normalize_parser)
    normalize_parser.set_defaults(func=normalize_command)

    extract_parser = subparsers.add_parser("extract", help="Print URLs found in text as-is")
    _add_common_arguments(extract_parser)
    extract_parser.set_defaults(func=extract_command)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if args.max_workers is not None and args.max_workers < 1:
        print("--max-workers must be >= 1", file=sys.stderr)
        return 2
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
