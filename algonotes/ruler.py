"""Ruler marking by divide and conquer."""


def ruler_marks(left: int, right: int, height: int) -> list[int]:
    """Return the mark height at each position from ``left`` to ``right`` inclusive.

    The midpoint of a span gets the current height, then both halves are
    marked one level lower. Later marks overwrite earlier ones; unmarked
    positions are 0.
    """
    if left < 0:
        raise ValueError("left must not be negative")
    if right < left:
        raise ValueError("right must not be less than left")
    marks = [0] * (right - left + 1)

    def mark(lo: int, hi: int, level: int) -> None:
        if level <= 0:
            return
        mid = (lo + hi) // 2
        marks[mid - left] = level
        mark(lo, mid, level - 1)
        mark(mid, hi, level - 1)

    mark(left, right, height)
    return marks


def render_ruler(left: int, right: int, height: int) -> str:
    """Draw the ruler: one line per position, ``---`` repeated by its mark height."""
    return "".join("---" * mark + "\n" for mark in ruler_marks(left, right, height))