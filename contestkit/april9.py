"""Bard songs, ring predecessors and obstacle levels."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate

BARD = 1
_LEVEL_CAP = 200_000
_COLOURS = "BW"
_OPPOSITE = {"B": "W", "W": "B"}


class _Reader:
    """Whitespace-separated token reader over a block of text."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        return int(self.word())


def bard_songs(villagers: int, evenings: Iterable[Sequence[int]]) -> list[int]:
    """Return the villagers (1-based, ascending) who know every song."""
    known: dict[int, set[int]] = {v: set() for v in range(1, villagers + 1)}
    songs = 0
    for evening in evenings:
        present = list(evening)
        for villager in present:
            if villager not in known:
                raise ValueError(f"unknown villager {villager}")
        if BARD in present:
            for villager in present:
                known[villager].add(songs)
            songs += 1
        else:
            shared = set().union(*(known[v] for v in present))
            for villager in present:
                known[villager] |= shared
    return [v for v, learned in known.items() if len(learned) == songs]


def _transform(ring: str) -> str:
    shifted = ring[-1:] + ring[:-1]
    return "".join("B" if prev == cur else "W" for prev, cur in zip(shifted, ring))


def _predecessor(ring: str, first: str) -> str | None:
    cells = [first, first if ring[0] == "B" else _OPPOSITE[first]]
    for colour in ring[1:-1]:
        cells.append(cells[-1] if colour == "B" else _OPPOSITE[cells[-1]])
    if (cells[0] == cells[-1]) != (ring[-1] == "B"):
        return None
    return "".join(cells)


def _canonical(ring: str) -> str:
    return min(ring[i:] + ring[:i] for i in range(len(ring)))


def count_predecessor_rings(ring: str, k: int) -> int:
    """Transform the ring k times, then count distinct k-step predecessors up to rotation."""
    if not ring:
        raise ValueError("ring must not be empty")
    if any(c not in _COLOURS for c in ring):
        raise ValueError("ring may only contain 'B' and 'W'")
    if k < 0:
        raise ValueError("k must be non-negative")
    for _ in range(k):
        ring = _transform(ring)
    frontier = [ring]
    for _ in range(k):
        frontier = [
            candidate
            for current in frontier
            for first in _COLOURS
            if (candidate := _predecessor(current, first)) is not None
        ]
    return len({_canonical(r) for r in frontier})


def obstacle_levels(height: int, obstacles: Sequence[int]) -> tuple[int, int]:
    """Return the fewest obstacles met on one level and how many levels achieve it."""
    if height < 1:
        raise ValueError("height must be positive")
    bottom = [0] * (height + 2)
    top = [0] * (height + 2)
    for position, size in enumerate(obstacles):
        if not 1 <= size <= height:
            raise ValueError(f"obstacle height {size} out of range")
        if position % 2 == 0:
            bottom[size] += 1
        else:
            top[height - size + 1] += 1
    from_bottom = list(accumulate(reversed(bottom[1 : height + 1])))[::-1]
    from_top = list(accumulate(top[1 : height + 1]))
    counts = [b + t for b, t in zip(from_bottom, from_top)]
    best = min(counts)
    if best > _LEVEL_CAP:
        return _LEVEL_CAP, 0
    return best, counts.count(best)


def run(problem: str, text: str) -> str:
    """Solve the named problem ("d", "e" or "f") for the given input text."""
    reader = _Reader(text)
    if problem == "d":
        villagers, count = reader.number(), reader.number()
        evenings = [
            [reader.number() for _ in range(reader.number())] for _ in range(count)
        ]
        return "".join(f"{v}\n" for v in bard_songs(villagers, evenings))
    if problem == "e":
        length, k = reader.number(), reader.number()
        ring = reader.word()[:length]
        return str(count_predecessor_rings(ring, k))
    if problem == "f":
        count, height = reader.number(), reader.number()
        obstacles = [reader.number() for _ in range(count)]
        best, levels = obstacle_levels(height, obstacles)
        return f"{best} {levels}\n"
    raise ValueError(f"unknown problem {problem!r}")