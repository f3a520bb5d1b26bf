"""Extract the bare hostname from user input."""

import re

from .models import InvalidURLFormat

_DOMAIN_RE = re.compile(
    r"^(?:[a-z][a-z0-9+.\-]*://)?"  # scheme
    r"(?:[^@/]+@)?"  # userinfo
    r"(?:www\.)?"
    r"([^:/?#\s]+)",
    re.IGNORECASE,
)
_HOSTNAME_CHAR_RE = re.compile(r"[A-Za-z0-9]")


def extract_domain(target: str) -> str:
    """Return the hostname of *target* without scheme, credentials, ``www.``, port or path.

    ``https://user@www.example.com:8080/path?q=1`` becomes ``example.com``.
    Raises :class:`InvalidURLFormat` when no hostname-like token is present.
    """
    match = _DOMAIN_RE.match(target.strip())
    if match is None or not _HOSTNAME_CHAR_RE.search(match.group(1)):
        raise InvalidURLFormat(target)
    return match.group(1)
