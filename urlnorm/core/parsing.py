from __future__ import annotations

import re
from urllib.parse import urlsplit

from urlnorm.core.models import ParsedURL


# RFC 3986 appendix B, restricted to URLs with an authority component.
_URL_PATTERN = re.compile(
    r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.\-]*)://"
    r"(?P<authority>[^/?#]*)"
    r"(?P<path>[^?#]*)"
    r"(?P<query>\?[^#]*)?"
    r"(?P<fragment>#.*)?$",
    re.DOTALL,
)
_INVALID_HOST_CHARS = frozenset('<>"{}|\\^`%/[]')


class UnnormalizableURL(ValueError):
    """Candidate cannot be turned into a canonical URL."""


def parse_url(candidate: str, default_scheme: str = "http") -> ParsedURL:
    """Split a candidate into its components without altering them.

    Args:
        candidate (str): Raw candidate URL, with or without a scheme.
        default_scheme (str): Scheme assumed when the candidate has none.

    Returns:
        ParsedURL: Component views over the (scheme-completed) candidate.

    Raises:
        UnnormalizableURL: The candidate is not a syntactically valid URL or
            its host has no top-level domain.
    """
    value = (candidate or "").strip()
    if not value:
        raise UnnormalizableURL("empty candidate")
    if any(ch.isspace() or ord(ch) < 0x20 or ch == "\x7f" for ch in value):
        raise UnnormalizableURL(f"whitespace or control character in {value!r}")

    try:
        parts = urlsplit(value)
        if not parts.scheme:
            if value.startswith("//"):
                value = f"{default_scheme}:{value}"
            else:
                value = f"{default_scheme}://{value}"
            parts = urlsplit(value)
    except ValueError as exc:
        raise UnnormalizableURL(f"not a URL: {value!r}") from exc
    if not parts.netloc:
        raise UnnormalizableURL(f"no authority in {value!r}")

    # urlsplit only decides scheme and authority presence; the pattern below
    # keeps every component and delimiter exactly as written.
    match = _URL_PATTERN.match(value)
    if match is None:
        raise UnnormalizableURL(f"not a URL: {value!r}")

    userinfo, at, host_port = match.group("authority").rpartition("@")
    host, colon, port = host_port.partition(":")
    if not host:
        raise UnnormalizableURL(f"missing host in {value!r}")
    if any(ch in _INVALID_HOST_CHARS for ch in host):
        raise UnnormalizableURL(f"invalid host {host!r}")
    if port and not port.isdigit():
        raise UnnormalizableURL(f"invalid port {port!r}")
    if host.endswith("."):
        raise UnnormalizableURL(f"host {host!r} has no top-level domain")

    return ParsedURL(
        scheme=match.group("scheme"),
        host=host,
        path=match.group("path"),
        userinfo=userinfo + at,
        port=colon + port,
        query=match.group("query") or "",
        fragment=match.group("fragment") or "",
    )


def encode_host(host: str) -> str:
    """IDNA-encode the non-ASCII labels of ``host``.

    ASCII labels, including ones already in ``xn--`` form, are returned
    untouched, which keeps the operation idempotent. Empty labels are kept so
    malformed hosts pass through unchanged.
    """
    if host.isascii():
        return host
    labels = []
    for label in host.split("."):
        if not label or label.isascii():
            labels.append(label)
            continue
        try:
            labels.append(label.encode("idna").decode("ascii"))
        except UnicodeError as exc:
            raise UnnormalizableURL(f"cannot IDNA-encode label {label!r}") from exc
    return ".".join(labels)
