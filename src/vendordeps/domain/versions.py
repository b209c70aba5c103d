"""Version ordering for vendor-supplied version strings.

Versions are not assumed to follow semantic versioning. Every string maps to a
sort key and ``is_newer`` compares keys, so the relation is a total preorder
and never raises:

- whitespace and a ``v``/``V`` prefix in front of a digit are ignored
- runs of ASCII digits are numbers (``01 == 1``), runs of ASCII letters are
  lower-cased words, anything else separates tokens
- the leading numbers are the release; trailing zero components are dropped,
  so ``1.2`` and ``1.2.0`` rank equal
- the remaining tokens are the suffix; a bare release is newer than the same
  release with a suffix (``1.0`` > ``1.0-beta``)
- suffix tokens compare numbers numerically and words lexically, a number
  outranks a word, and a suffix that is a prefix of a longer one is older
- a blank version is older than anything else

Two versions of equal rank are not necessarily the same text (``1.2`` vs
``1.2.0``, ``1.0-Beta`` vs ``1.0-beta``).
"""

from __future__ import annotations

import re
from typing import Final

_TOKEN_RE: Final = re.compile(r"[0-9]+|[a-z]+")

# Numbers are kept as (digit count, digits) with leading zeros stripped, which
# orders them numerically without int() and its digit-count limit.
type _Number = tuple[int, str]
type _Token = tuple[int, _Number, str]
type VersionKey = tuple[int, tuple[_Number, ...], tuple[int, tuple[_Token, ...]]]

_BLANK_KEY: Final[VersionKey] = (0, (), (0, ()))


def version_key(version: str | None) -> VersionKey:
    """Return the sort key of ``version``; larger keys are newer releases."""

    text = (version or "").strip().lower()
    if not text:
        return _BLANK_KEY
    if text[0] == "v" and text[1:2].isascii() and text[1:2].isdigit():
        text = text[1:]

    tokens: list[str] = _TOKEN_RE.findall(text)
    split = 0
    while split < len(tokens) and tokens[split].isdigit():
        split += 1

    release = [_number(token) for token in tokens[:split]]
    while release and release[-1] == (0, ""):
        release.pop()

    suffix = tuple(_suffix_token(token) for token in tokens[split:])
    # an empty suffix ranks above any suffix
    suffix_key = (0, suffix) if suffix else (1, ())
    return (1, tuple(release), suffix_key)


def is_newer(candidate: str | None, baseline: str | None) -> bool:
    """Return True if ``candidate`` is a strictly newer release than ``baseline``."""

    return version_key(candidate) > version_key(baseline)


def _number(token: str) -> _Number:
    digits = token.lstrip("0")
    return (len(digits), digits)


def _suffix_token(token: str) -> _Token:
    if token.isdigit():
        return (1, _number(token), "")
    return (0, (0, ""), token)


__all__ = ["VersionKey", "is_newer", "version_key"]
