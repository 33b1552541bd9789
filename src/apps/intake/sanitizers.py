"""Turn client-supplied names into safe single path segments."""

import re

ANONYMOUS = "anonymous"

_CLIENT_NAME_DISALLOWED = re.compile(r"[^a-z0-9\-_\s]")
_FILENAME_DISALLOWED = re.compile(r"[^A-Za-z0-9\-_\s]")
_WHITESPACE_RUN = re.compile(r"\s+")


def _collapse_whitespace(value: str) -> str:
    return _WHITESPACE_RUN.sub("-", value.strip())


def sanitize_name(raw: str | None) -> str:
    """Lowercase, strip anything outside ``[a-z0-9-_]`` and hyphen-join words.

    Falls back to ``"anonymous"`` when nothing usable is left.
    """
    if not raw:
        return ANONYMOUS
    cleaned = _collapse_whitespace(_CLIENT_NAME_DISALLOWED.sub("", raw.lower()))
    return cleaned or ANONYMOUS


def sanitize_filename_base(base: str) -> str:
    """Same character filter as :func:`sanitize_name` but case is preserved.

    Returns an empty string when nothing is left; callers pick the fallback.
    """
    return _collapse_whitespace(_FILENAME_DISALLOWED.sub("", base))
