"""Discounts, checkers, block ciphers, barriers, dates, cranes, jumps and more."""

from __future__ import annotations

import re
from collections import Counter, deque
from collections.abc import Iterable, Sequence
from datetime import date
from itertools import permutations

_INFINITY = 10**9
_DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
_ORTHOGONALS = ((0, 1), (1, 0), (0, -1), (-1, 0))
_DIGITS = frozenset("0123456789")
_WORD_PATTERN = re.compile(r"\s*(\S+)")


class _Reader:
    """Whitespace-separated word reader that can also hand out single characters."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())
        self._pending = ""

    def word(self) -> str:
        if self._pending:
            word, self._pending = self._pending, ""
            return word
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        return int(self.word())

    def char(self) -> str:
        if not self._pending:
            self._pending = self.word()
        first, self._pending = self._pending[0], self._pending[1:]
        return first


def discounted_total(prices: Iterable[int]) -> int:
    """Total price when every third item, cheapest in each group of three, is free."""
    ordered = sorted(prices, reverse=True)
    return sum(price for position, price in enumerate(ordered) if position % 3 != 2)


def _clears_board(grid: Sequence[str], start: tuple[int, int], whites: int) -> bool:
    size = len(grid)
    seen = {start}
    degree: Counter[tuple[int, int]] = Counter()
    jumps = 0
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _DIAGONALS:
            lx, ly = x + 2 * dx, y + 2 * dy
            if not (0 <= lx < size and 0 <= ly < size) or grid[lx][ly] != "_":
                continue
            middle = (x + dx, y + dy)
            if grid[middle[0]][middle[1]] != "W":
                continue
            landing = (lx, ly)
            if middle not in seen:
                seen.add(middle)
                degree[(x, y)] += 1
                degree[landing] += 1
                jumps += 1
            if landing in seen:
                continue
            seen.add(landing)
            queue.append(landing)
    if jumps != whites:
        return False
    odd = sum(1 for d in degree.values() if d % 2)
    return odd == 0 or (odd == 2 and degree[start] % 2 == 1)


def checkers_winning_moves(grid: Sequence[str]) -> int:
    """Count black pieces that can capture every white piece in one multi-jump."""
    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError("grid must be square")
    whites = sum(row.count("W") for row in grid)
    blacks = [(i, j) for i, row in enumerate(grid) for j, c in enumerate(row) if c == "B"]
    return sum(1 for start in blacks if _clears_board(grid, start, whites))


def permute_blocks(perm: Sequence[int], text: str) -> str:
    """Pad text with spaces to whole blocks and reorder each block by the 1-based perm."""
    width = len(perm)
    if width == 0:
        raise ValueError("permutation must not be empty")
    if any(not 1 <= p <= width for p in perm):
        raise ValueError("permutation entries must lie in 1..n")
    padded = text + " " * (-len(text) % width)
    return "".join(
        "".join(padded[start + p - 1] for p in perm)
        for start in range(0, len(padded), width)
    )


class _FlowNetwork:
    """Residual graph with Dinic's maximum flow."""

    def __init__(self, size: int) -> None:
        self._adjacent: list[list[int]] = [[] for _ in range(size)]
        self._target: list[int] = []
        self._capacity: list[int] = []

    def add_edge(self, source: int, target: int, capacity: int) -> None:
        if source == target:
            return
        self._adjacent[source].append(len(self._target))
        self._target.append(target)
        self._capacity.append(capacity)
        self._adjacent[target].append(len(self._target))
        self._target.append(source)
        self._capacity.append(0)

    def _levels(self, source: int, sink: int) -> list[int] | None:
        level = [-1] * len(self._adjacent)
        level[source] = 0
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for edge in self._adjacent[u]:
                v = self._target[edge]
                if self._capacity[edge] > 0 and level[v] == -1:
                    level[v] = level[u] + 1
                    queue.append(v)
        return level if level[sink] != -1 else None

    def _blocking_flow(self, source: int, sink: int, level: list[int]) -> int:
        cursor = [0] * len(self._adjacent)
        total = 0
        while True:
            path: list[int] = []
            u = source
            while u != sink:
                adjacent = self._adjacent[u]
                while cursor[u] < len(adjacent):
                    edge = adjacent[cursor[u]]
                    v = self._target[edge]
                    if self._capacity[edge] > 0 and level[v] == level[u] + 1:
                        break
                    cursor[u] += 1
                else:
                    if u == source:
                        return total
                    edge = path.pop()
                    u = self._target[edge ^ 1]
                    cursor[u] += 1
                    continue
                path.append(edge)
                u = v
            pushed = min(self._capacity[edge] for edge in path)
            for edge in path:
                self._capacity[edge] -= pushed
                self._capacity[edge ^ 1] += pushed
            total += pushed

    def max_flow(self, source: int, sink: int) -> int:
        total = 0
        while (level := self._levels(source, sink)) is not None:
            total += self._blocking_flow(source, sink, level)
        return total


def min_barrier_cost(grid: Sequence[str], costs: Sequence[int]) -> int | None:
    """Cheapest set of lettered cells to block so no 'B' reaches the edge, or None."""
    rows = len(grid)
    if rows == 0:
        raise ValueError("grid must not be empty")
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must have equal length")
    cells = rows * cols
    source, sink = 2 * cells, 2 * cells + 1
    network = _FlowNetwork(2 * cells + 2)
    for i in range(rows):
        for j in range(cols):
            exit_node = cells + i * cols + j
            for di, dj in _ORTHOGONALS:
                u, v = i + di, j + dj
                if 0 <= u < rows and 0 <= v < cols:
                    network.add_edge(exit_node, u * cols + v, _INFINITY)
                else:
                    network.add_edge(exit_node, sink, _INFINITY)
    for i, row in enumerate(grid):
        for j, mark in enumerate(row):
            entry = i * cols + j
            exit_node = cells + entry
            if mark == "B":
                network.add_edge(source, entry, _INFINITY)
                network.add_edge(entry, exit_node, _INFINITY)
            elif "a" <= mark <= "z":
                index = ord(mark) - ord("a")
                if index >= len(costs):
                    raise ValueError(f"no cost given for {mark!r}")
                network.add_edge(entry, exit_node, costs[index])
            else:
                network.add_edge(entry, exit_node, _INFINITY)
    flow = network.max_flow(source, sink)
    return None if flow >= _INFINITY else flow


def _as_date(digits: str) -> date | None:
    day, month, year = int(digits[:2]), int(digits[2:4]), int(digits[4:])
    if year < 2000:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None


def count_valid_dates(digits: str) -> tuple[int, date | None]:
    """Count DDMMYYYY arrangements of eight digits that are dates from 2000 on."""
    if len(digits) != 8 or not set(digits) <= _DIGITS:
        raise ValueError("expected exactly eight decimal digits")
    valid = [
        found
        for arrangement in set(permutations(digits))
        if (found := _as_date("".join(arrangement))) is not None
    ]
    return len(valid), min(valid, default=None)


def max_crane_area(cranes: Iterable[tuple[int, int, int]]) -> int:
    """Largest sum of squared radii over cranes whose circles pairwise keep apart."""
    pool = list(cranes)
    best = 0

    def clash(a: tuple[int, int, int], b: tuple[int, int, int]) -> bool:
        (x1, y1, r1), (x2, y2, r2) = a, b
        return (x1 - x2) ** 2 + (y1 - y2) ** 2 <= (r1 + r2) ** 2

    def search(index: int, chosen: list[tuple[int, int, int]], area: int) -> None:
        nonlocal best
        if index == len(pool):
            best = max(best, area)
            return
        search(index + 1, chosen, area)
        crane = pool[index]
        if not any(clash(crane, other) for other in chosen):
            chosen.append(crane)
            search(index + 1, chosen, area + crane[2] ** 2)
            chosen.pop()

    search(0, [], 0)
    return best


def grid_jump_distance(grid: Sequence[str]) -> int | None:
    """Fewest jumps from top-left to bottom-right, each the length of the cell's digit."""
    rows = len(grid)
    if rows == 0 or not grid[0]:
        raise ValueError("grid must not be empty")
    cols = len(grid[0])
    if any(len(row) != cols or not set(row) <= _DIGITS for row in grid):
        raise ValueError("grid rows must be digits of equal length")
    target = (rows - 1, cols - 1)
    seen = {(0, 0)}
    queue = deque([((0, 0), 0)])
    while queue:
        (x, y), steps = queue.popleft()
        if (x, y) == target:
            return steps
        jump = int(grid[x][y])
        for dx, dy in _ORTHOGONALS:
            nxt = (x + dx * jump, y + dy * jump)
            if 0 <= nxt[0] < rows and 0 <= nxt[1] < cols and nxt not in seen:
                seen.add(nxt)
                queue.append((nxt, steps + 1))
    return None


def _quadrant(x: int, y: int, size: int) -> int:
    if x * 2 < size:
        return 0 if y * 2 < size else 1
    return 3 if y * 2 < size else 2


def _zoom(x: int, y: int, quadrant: int, size: int) -> tuple[int, int]:
    if quadrant == 0:
        return y * 2, x * 2
    if quadrant == 1:
        return x * 2, y * 2 - size
    if quadrant == 2:
        return x * 2 - size, y * 2 - size
    return size - y * 2, size - (x * 2 - size)


def _curve_order(points: list[tuple[int, int, int]], size: int):
    if len(points) == 1:
        yield points[0][2]
        return
    buckets: list[list[tuple[int, int, int]]] = [[], [], [], []]
    for x, y, index in points:
        quadrant = _quadrant(x, y, size)
        buckets[quadrant].append((*_zoom(x, y, quadrant, size), index))
    for bucket in buckets:
        if bucket:
            yield from _curve_order(bucket, size)


def hilbert_order(
    points: Sequence[tuple[int, int]], size: int
) -> list[tuple[int, int]]:
    """Sort distinct points of the square [0, size]^2 along a Hilbert curve."""
    pts = [tuple(p) for p in points]
    if any(not (0 <= x <= size and 0 <= y <= size) for x, y in pts):
        raise ValueError("points must lie within the square")
    if len(set(pts)) != len(pts):
        raise ValueError("points must be distinct")
    if not pts:
        return []
    tagged = [(x, y, i) for i, (x, y) in enumerate(pts)]
    return [pts[i] for i in _curve_order(tagged, size)]


def _break_pair(first: str, second: str) -> tuple[str, str] | None:
    x, y = int(first), int(second)
    for i in range(len(first)):
        candidate = first[:i] + "9" + first[i + 1 :]
        if int(candidate) > y:
            return candidate, second
    if len(second) == 1 and x > 0:
        return first, "0"
    for i in range(len(second)):
        candidate = second[:i] + ("1" if i == 0 else "0") + second[i + 1 :]
        if int(candidate) < x:
            return first, candidate
    return None


def break_sequence(numbers: Sequence[str]) -> list[str] | None:
    """Change one digit so the sequence is no longer increasing, or None if impossible."""
    if any(not n or not set(n) <= _DIGITS for n in numbers):
        raise ValueError("numbers must be non-empty decimal strings")
    result = list(numbers)
    for i, (first, second) in enumerate(zip(result, result[1:])):
        changed = _break_pair(first, second)
        if changed is not None:
            result[i], result[i + 1] = changed
            return result
    return None


def _run_permute(text: str) -> str:
    out = []
    position = 0

    def next_word() -> str | None:
        nonlocal position
        match = _WORD_PATTERN.match(text, position)
        if match is None:
            return None
        position = match.end()
        return match.group(1)

    while (first := next_word()) is not None and int(first) > 0:
        perm = []
        for _ in range(int(first)):
            value = next_word()
            if value is None:
                raise ValueError("unexpected end of input")
            perm.append(int(value))
        position += 1
        end = text.find("\n", position)
        if end == -1:
            end = len(text)
        line = text[position:end]
        position = end + 1
        out.append(f"'{permute_blocks(perm, line)}'\n")
    return "".join(out)


def run(problem: str, text: str) -> str:
    """Solve the named problem for the given input text."""
    if problem == "d":
        return _run_permute(text)
    reader = _Reader(text)
    if problem == "b":
        prices = [reader.number() for _ in range(reader.number())]
        return f"{discounted_total(prices)}\n"
    if problem == "c":
        size = reader.number()
        grid = [reader.word()[:size] for _ in range(size)]
        return f"{checkers_winning_moves(grid)}\n"
    if problem == "f":
        cols, rows, k = reader.number(), reader.number(), reader.number()
        grid = [reader.word()[:cols] for _ in range(rows)]
        costs = [reader.number() for _ in range(k)]
        cost = min_barrier_cost(grid, costs)
        return f"{-1 if cost is None else cost}\n"
    if problem == "g":
        out = []
        for _ in range(reader.number()):
            digits = "".join(reader.char() for _ in range(8))
            count, earliest = count_valid_dates(digits)
            line = str(count)
            if earliest is not None:
                line += f" {earliest.day:02d} {earliest.month:02d} {earliest.year:04d}"
            out.append(line + "\n")
        return "".join(out)
    if problem == "i":
        out = []
        for _ in range(reader.number()):
            cranes = [
                (reader.number(), reader.number(), reader.number())
                for _ in range(reader.number())
            ]
            out.append(f"{max_crane_area(cranes)}\n")
        return "".join(out)
    if problem == "j":
        rows, cols = reader.number(), reader.number()
        grid = ["".join(reader.char() for _ in range(cols)) for _ in range(rows)]
        steps = grid_jump_distance(grid)
        return f"{-1 if steps is None else steps}\n"
    if problem == "l":
        count, size = reader.number(), reader.number()
        points = [(reader.number(), reader.number()) for _ in range(count)]
        return "".join(f"{x} {y}\n" for x, y in hilbert_order(points, size))
    if problem == "m":
        numbers = [reader.word() for _ in range(reader.number())]
        result = break_sequence(numbers)
        return "impossible\n" if result is None else " ".join(result) + "\n"
    raise ValueError(f"unknown problem {problem!r}")