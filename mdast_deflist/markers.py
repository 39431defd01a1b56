"""List marker grammar for raw item text.

Two marker classes introduce a list item:

- bullets (``-``, ``+``, ``*``) for unordered items
- decimal ordinals followed by a dot (``1.``, ``42.``) for ordered items

A marker is only a marker when a whitespace character follows it, so
``-foo``, ``1.5`` and ``**bold**`` are plain text. The whitespace character
is consumed together with the marker.
"""

from dataclasses import dataclass
from enum import Enum

BULLET_CHARS = frozenset("-+*")
DIGITS = frozenset("0123456789")


class MarkerKind(Enum):
    """Class of a list marker."""

    BULLET = "bullet"
    ORDINAL = "ordinal"


ALL_KINDS = frozenset(MarkerKind)
BULLETS = frozenset({MarkerKind.BULLET})
ORDINALS = frozenset({MarkerKind.ORDINAL})


@dataclass(frozen=True)
class Marker:
    """A list marker found at the start of a piece of text."""

    kind: MarkerKind
    token: str  # "-" or "12."
    start: int  # Offset of the token, after any indentation
    end: int  # Offset just past the whitespace that follows the token


def match_marker(
    text: str, kinds: frozenset[MarkerKind] = ALL_KINDS, *, indent: bool = True
) -> Marker | None:
    """Match a list marker at the start of text.

    Args:
        text: Text to inspect.
        kinds: Marker classes to accept.
        indent: Whether leading whitespace may precede the marker.

    Returns:
        The matched Marker, or None when text does not start with one.
    """
    pos = 0
    if indent:
        while pos < len(text) and text[pos].isspace():
            pos += 1
    start = pos

    if pos < len(text) and text[pos] in BULLET_CHARS:
        kind = MarkerKind.BULLET
        pos += 1
    else:
        while pos < len(text) and text[pos] in DIGITS:
            pos += 1
        if pos == start or pos >= len(text) or text[pos] != ".":
            return None
        kind = MarkerKind.ORDINAL
        pos += 1

    if kind not in kinds:
        return None
    if pos >= len(text) or not text[pos].isspace():
        return None
    return Marker(kind=kind, token=text[start:pos], start=start, end=pos + 1)


def has_marker(
    text: str, kinds: frozenset[MarkerKind] = ALL_KINDS, *, indent: bool = True
) -> bool:
    """Check whether text starts with a list marker of the given kinds."""
    return match_marker(text, kinds, indent=indent) is not None


def strip_marker(
    text: str, kinds: frozenset[MarkerKind] = ALL_KINDS, *, indent: bool = True
) -> str:
    """Remove leading list markers of the given kinds.

    Stacked markers (``"- 1. item"``) are all removed, so stripping already
    stripped text returns it unchanged. Text without a marker, including its
    indentation, is returned as is.
    """
    marker = match_marker(text, kinds, indent=indent)
    while marker is not None:
        text = text[marker.end :]
        marker = match_marker(text, kinds, indent=indent)
    return text


def is_ordinal(text: str) -> bool:
    """Check whether text starts with an unindented ordinal marker such as ``3. ``."""
    return has_marker(text, ORDINALS, indent=False)
