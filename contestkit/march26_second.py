"""Visible chains, balanced splits, routes, nearest matches and expected costs."""

from __future__ import annotations

import math
import re
from bisect import bisect_right
from collections import Counter
from collections.abc import Iterable, Sequence
from string import ascii_lowercase

_TOTAL = 100_000
_HALF_TOTAL = _TOTAL // 2
_WORD_PATTERN = re.compile(r"\s*(\S+)")
_NO_ROUTE = "no route found"
_LETTERS = frozenset(ascii_lowercase)


class _Reader:
    """Whitespace-separated word reader over a block of text."""

    def __init__(self, text: str) -> None:
        self._words = text.split()
        self._position = 0

    def exhausted(self) -> bool:
        return self._position >= len(self._words)

    def word(self) -> str:
        if self.exhausted():
            raise ValueError("unexpected end of input")
        word = self._words[self._position]
        self._position += 1
        return word

    def number(self) -> int:
        return int(self.word())

    def real(self) -> float:
        return float(self.word())


def longest_visible_chain(points: Iterable[tuple[int, int]], radius: int) -> int:
    """Length of the longest chain of points ordered along the skewed sweep."""
    if radius <= 0:
        raise ValueError("radius must be positive")
    keys = sorted(
        (2 * radius * x + 2 * y, 2 * radius * y) for x, y in points
    )
    tails: list[int] = []
    for first, second in keys:
        value = second - radius * first // 2
        slot = bisect_right(tails, value)
        if slot == len(tails):
            tails.append(value)
        else:
            tails[slot] = value
    return len(tails)


def balanced_split(weights: Sequence[float]) -> list[int]:
    """Pick items (1-based) whose scaled weights come closest to half without passing it."""
    if not weights:
        raise ValueError("weights must not be empty")
    if any(w <= 0 for w in weights):
        raise ValueError("weights must be positive")
    total = 0.0
    for weight in weights:
        total += weight
    rounded = [math.ceil(w * _TOTAL / total) for w in weights]
    last = [0] * (_HALF_TOTAL + 1)
    last[0] = -1
    reached = {0}
    for item, size in enumerate(rounded, start=1):
        grown = {p + size for p in reached if p + size <= _HALF_TOTAL}
        for position in grown:
            last[position] = item
        reached |= grown
    position = max(reached)
    chosen = []
    while position:
        item = last[position]
        chosen.append(item)
        position -= rounded[item - 1]
    return chosen


def min_removals_two_letters(text: str) -> int:
    """Fewest letters to delete so that at most two distinct letters remain."""
    if not set(text) <= _LETTERS:
        raise ValueError("text may only contain lowercase letters")
    top = sorted(Counter(text).values(), reverse=True)[:2]
    return len(text) - sum(top)


def _parse_network(lines: Iterable[str]) -> dict[str, list[str]]:
    adjacent: dict[str, list[str]] = {}
    for line in lines:
        node, _, rest = line.partition(" ")
        adjacent.setdefault(node, [])
        for neighbour in (w for w in rest.split(" ") if w):
            adjacent.setdefault(neighbour, [])
            adjacent[node].append(neighbour)
            adjacent[neighbour].append(node)
    return adjacent


def _route(adjacent: dict[str, list[str]], source: str, target: str) -> list[str] | None:
    if source == target:
        return [source]
    visited = {source}
    stack = [(source, iter(adjacent[source]))]
    while stack:
        _, neighbours = stack[-1]
        for neighbour in neighbours:
            if neighbour in visited:
                continue
            visited.add(neighbour)
            if neighbour == target:
                return [name for name, _ in stack] + [target]
            stack.append((neighbour, iter(adjacent[neighbour])))
            break
        else:
            stack.pop()
    return None


def find_route(lines: Iterable[str], source: str, target: str) -> list[str] | None:
    """Depth-first route between two named nodes of a link list, or None."""
    adjacent = _parse_network(lines)
    if source not in adjacent or target not in adjacent:
        return None
    return _route(adjacent, source, target)


def unmatched_count(first: Sequence[int], second: Sequence[int]) -> int:
    """How many of first must share their nearest partner in second with another."""
    ordered = sorted(second)
    if first and not ordered:
        raise ValueError("second must not be empty")
    chosen = {
        min(range(len(ordered)), key=lambda j: abs(ordered[j] - value))
        for value in first
    }
    return len(first) - len(chosen)


def expected_cost(energy: int, step_short: int, step_far: int) -> float:
    """Cost of the cheaper plan given the chance of finishing with the given energy."""
    if step_short <= 0 or step_far <= 0:
        raise ValueError("steps must be positive")
    chance = [1.0] * (max(energy, 0) + 1)
    for value in range(1, energy + 1):
        a = chance[max(value - step_short, 0)]
        b = chance[max(value - step_far, 0)]
        chance[value] = 0.0 if a + b < 1e-20 else (a * b) / (a + b)
    success = chance[energy] if energy > 0 else 1.0
    if success < 1e-13:
        return 225 * success
    odds = math.inf if success == 1.0 else success / (1 - success)
    return min(225 * success, 200 * odds)


def _run_route(text: str) -> str:
    match = _WORD_PATTERN.match(text)
    if match is None:
        raise ValueError("unexpected end of input")
    count = int(match.group(1))
    rest = text[match.end() + 1 :].split("\n")
    lines, tail = rest[:count], rest[count:]
    words = "\n".join(tail).split()
    if len(words) < 2:
        raise ValueError("unexpected end of input")
    source, target = words[0], words[1]
    adjacent = _parse_network(lines)
    if source not in adjacent or target not in adjacent:
        return _NO_ROUTE
    path = _route(adjacent, source, target)
    return (_NO_ROUTE if path is None else " ".join(path)) + "\n"


def run(problem: str, text: str) -> str:
    """Solve the named problem for the given input text."""
    if problem == "q":
        return _run_route(text)
    reader = _Reader(text)
    if problem == "n":
        count, radius = reader.number(), reader.number()
        reader.number()
        reader.number()
        points = [(reader.number(), reader.number()) for _ in range(count)]
        return f"{longest_visible_chain(points, radius)}\n"
    if problem == "o":
        out = []
        while not reader.exhausted():
            count = reader.number()
            if count == 0:
                break
            weights = [reader.real() for _ in range(count)]
            out.append("".join(f"{i} " for i in balanced_split(weights)) + "\n")
        return "".join(out)
    if problem == "p":
        return f"{min_removals_two_letters(reader.word())}\n"
    if problem == "r":
        n, m = reader.number(), reader.number()
        first = [reader.number() for _ in range(n)]
        second = [reader.number() for _ in range(m)]
        return f"{unmatched_count(first, second)}\n"
    if problem == "s":
        energy, short, far = reader.number(), reader.number(), reader.number()
        return f"{expected_cost(energy, short, far):.20g}\n"
    raise ValueError(f"unknown problem {problem!r}")