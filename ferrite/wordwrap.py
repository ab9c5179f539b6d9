"""Unicode-aware wrapping of text at grapheme cluster boundaries."""

from __future__ import annotations

import unicodedata
from enum import Enum
from typing import NamedTuple, Optional

import regex
from wcwidth import wcwidth

_GRAPHEME = regex.compile(r"\X")

_MANDATORY = frozenset("\n\r\x0b\x0c\x85\u2028\u2029")
_ZERO_WIDTH_SPACE = "\u200b"
_WORD_JOINER = "\u2060"
_SPACES = frozenset(" \t")
_HYPHENS = frozenset("-\u2010\u2012\u2013")
_OPENERS = frozenset("([{")
_CLOSERS = frozenset(")]}!?,.;:/")


class _Break(Enum):
    NONE = 0
    CAN = 1
    MUST = 2


class _Position(NamedTuple):
    index: int = 0
    width: int = 0


def _is_space(cluster: str) -> bool:
    return all(ch.isspace() for ch in cluster)


def _cluster_width(cluster: str) -> int:
    if "\ufe0f" in cluster:
        return 2
    return max(wcwidth(cluster[0]), 0)


def _is_ideographic(cluster: str) -> bool:
    ch = cluster[0]
    return unicodedata.east_asian_width(ch) in ("W", "F") and unicodedata.category(ch) in (
        "Lo",
        "So",
    )


def _break_after(
    cluster: str,
    following: Optional[str],
    previous: Optional[str],
    last_visible: Optional[str],
) -> _Break:
    """Classify the line break opportunity between two clusters."""
    last = cluster[-1]
    if last in _MANDATORY or following is None:
        return _Break.MUST

    nxt = following[0]
    if nxt in _MANDATORY or nxt == " " or nxt == _ZERO_WIDTH_SPACE:
        return _Break.NONE
    if last == _ZERO_WIDTH_SPACE:
        return _Break.CAN
    if last == _WORD_JOINER or nxt == _WORD_JOINER:
        return _Break.NONE
    if nxt in _CLOSERS:
        return _Break.NONE
    if last in _OPENERS:
        return _Break.NONE

    if last in _SPACES:
        if last == " " and last_visible is not None and last_visible[-1] in _OPENERS:
            return _Break.NONE
        return _Break.CAN

    if nxt in _HYPHENS or nxt == "\t":
        return _Break.NONE

    if last in _HYPHENS:
        if previous is None or _is_space(previous):
            return _Break.NONE
        if last == "-" and nxt.isdigit():
            return _Break.NONE
        return _Break.CAN

    if _is_ideographic(cluster) or _is_ideographic(following):
        return _Break.CAN

    return _Break.NONE


def wrap(text: str, width: int) -> list[str]:
    """Wrap ``text`` so that each line fits within ``width`` columns.

    Words longer than ``width`` are kept whole on their own line.
    """
    clusters = _GRAPHEME.findall(text)
    wrapped: list[str] = []

    lower = mid = nonspace = upper = _Position()

    def flush(force: bool) -> None:
        nonlocal lower
        if lower.index >= mid.index:
            return
        if not force and nonspace.width - lower.width <= width:
            return
        wrapped.append(text[lower.index : mid.index].strip())
        lower = mid

    previous: Optional[str] = None
    last_visible: Optional[str] = None

    for cluster, following in zip(clusters, [*clusters[1:], None]):
        upper = _Position(upper.index + len(cluster), upper.width + _cluster_width(cluster))
        visible = not _is_space(cluster)
        if visible:
            nonspace = upper

        flush(False)

        kind = _break_after(cluster, following, previous, last_visible)
        if kind is not _Break.NONE:
            mid = upper
        if kind is _Break.MUST:
            flush(True)

        previous = cluster
        if visible:
            last_visible = cluster

    return wrapped