from __future__ import annotations

from typing import List, Optional, Sequence

from .errors import MalformedInput


PAIRS = {"(": ")", "[": "]", "{": "}", "<": ">"}
CLOSERS = {v: k for k, v in PAIRS.items()}

ERROR_POINTS = {")": 3, "]": 57, "}": 1197, ">": 25137}
COMPLETION_POINTS = {")": 1, "]": 2, "}": 3, ">": 4}


def _scan(line: str):
    """Return (first illegal closer or None, stack of still-open chunks)."""
    stack: List[str] = []
    for ch in line:
        if ch in PAIRS:
            stack.append(ch)
        elif ch in CLOSERS:
            if not stack or stack.pop() != CLOSERS[ch]:
                return ch, stack
    return None, stack


def first_illegal(line: str) -> Optional[str]:
    illegal, _ = _scan(line)
    return illegal


def syntax_error_score(line: str) -> int:
    illegal = first_illegal(line)
    return ERROR_POINTS[illegal] if illegal else 0


def completion(line: str) -> str:
    """Closing characters that finish an incomplete but otherwise valid line."""
    illegal, stack = _scan(line)
    if illegal is not None:
        raise MalformedInput(f"corrupted line, unexpected {illegal!r}")
    return "".join(PAIRS[ch] for ch in reversed(stack))


def autocomplete_score(line: str) -> int:
    score = 0
    for ch in completion(line):
        score = score * 5 + COMPLETION_POINTS[ch]
    return score


def middle_score(scores: Sequence[int]) -> int:
    if not scores:
        raise MalformedInput("no incomplete lines to score")
    ordered = sorted(scores)
    return ordered[len(ordered) // 2]
