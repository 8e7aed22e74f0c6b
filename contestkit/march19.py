"""Independent sets, drafts, river crossing, cube nets and other small problems."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Mapping, Sequence
from functools import cache
from itertools import groupby

_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1), (0, 0))

_CUBE_NETS = frozenset(
    frozenset(cells)
    for cells in (
        ((0, 0), (1, 0), (1, 1), (1, 2), (1, 3), (2, 0)),
        ((0, 0), (1, -1), (1, 0), (1, 1), (1, 2), (2, -1)),
        ((0, 0), (1, -2), (1, -1), (1, 0), (1, 1), (2, -2)),
        ((0, 0), (1, -3), (1, -2), (1, -1), (1, 0), (2, -3)),
        ((0, 0), (1, -1), (1, 0), (1, 1), (1, 2), (2, 0)),
        ((0, 0), (1, -2), (1, -1), (1, 0), (1, 1), (2, -1)),
        ((0, 0), (1, 0), (1, 1), (1, 2), (2, -1), (2, 0)),
        ((0, 0), (1, -1), (1, 0), (1, 1), (2, -2), (2, -1)),
        ((0, 0), (1, -2), (1, -1), (1, 0), (2, -3), (2, -2)),
        ((0, 0), (0, 1), (1, -1), (1, 0), (2, -2), (2, -1)),
        ((0, 0), (0, 1), (0, 2), (1, -2), (1, -1), (1, 0)),
    )
)


class _Reader:
    """Whitespace-separated token reader over a block of text."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        return int(self.word())


def count_independent_sets(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count vertex subsets of 1..n containing no edge entirely."""
    masks = []
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) out of range")
        masks.append((1 << (a - 1)) | (1 << (b - 1)))
    return sum(
        1 for subset in range(1 << n) if all(subset & m != m for m in masks)
    )


def draft_picks(
    preferences: Sequence[Sequence[str]], rounds: int, common: Sequence[str]
) -> list[list[str]]:
    """Run a snake-free round-robin draft and return each player's picks."""
    players = len(preferences)
    queues = [iter(p) for p in preferences]
    pool = iter(common)
    taken: set[str] = set()
    picks: list[list[str]] = [[] for _ in preferences]
    for turn in range(players * rounds):
        player = turn % players
        choice = next((n for n in queues[player] if n not in taken), None)
        if choice is None:
            choice = next((n for n in pool if n not in taken), None)
            if choice is None:
                raise ValueError("no names left to pick")
        picks[player].append(choice)
        taken.add(choice)
    return picks


def _locate(grid: Sequence[str], mark: str) -> tuple[int, int]:
    for x, row in enumerate(grid):
        y = row.find(mark)
        if y != -1:
            return x, y
    raise ValueError(f"grid has no {mark!r}")


def river_crossing(limit: int, grid: Sequence[str]) -> int | None:
    """Fewest turns from 'F' to 'G' across moving lanes, or None if impossible."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must have equal length")
    rows = len(grid)
    source = _locate(grid, "F")
    target = _locate(grid, "G")
    tx, ty = target

    def passable(x: int, y: int, t: int) -> bool:
        if x in (0, rows - 1):
            column = y
        else:
            direction = 1 if (rows - x) % 2 == 0 else -1
            column = (y - direction * t) % width
        return grid[x][column] != "X" and abs(x - tx) + abs(y - ty) <= limit - t

    seen = {(*source, 0)}
    queue = deque([(source, 0)])
    while queue:
        (x, y), t = queue.popleft()
        if (x, y) == target:
            return t
        if t == limit:
            continue
        for dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if not (0 <= nx < rows and 0 <= ny < width):
                continue
            key = (nx, ny, (t + 1) % width)
            if key in seen or not passable(nx, ny, t + 1):
                continue
            seen.add(key)
            queue.append(((nx, ny), t + 1))
    return None


def _shape(rows: Sequence[str]) -> frozenset[tuple[int, int]]:
    cells = [(i, j) for i, row in enumerate(rows) for j, c in enumerate(row) if c == "#"]
    if not cells:
        return frozenset()
    oi, oj = cells[0]
    return frozenset((i - oi, j - oj) for i, j in cells)


def _orientations(rows: list[str]):
    for _ in range(4):
        yield rows
        yield [row[::-1] for row in rows]
        rows = ["".join(column) for column in zip(*rows)][::-1]


def cube_net_folds(grid: Sequence[str]) -> bool:
    """Tell whether the '#' cells of a square grid form a net of a cube."""
    rows = list(grid)
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("grid must be square")
    return any(_shape(o) in _CUBE_NETS for o in _orientations(rows))


def sentence_values(
    values: Mapping[str, int], sentences: Iterable[Iterable[str]]
) -> list[int]:
    """Sum word values per sentence; unknown words count as zero."""
    return [sum(values.get(word, 0) for word in sentence) for sentence in sentences]


def arrival_order(counts: Sequence[int]) -> list[int]:
    """Order people 1..n by how many arrived before them; person 1 came first."""
    people = [(-1, 1)] + [(c, i) for i, c in enumerate(counts, start=2)]
    return [person for _, person in sorted(people)]


def max_rectangle_area(n: int, a: int, b: int) -> int:
    """Four times the largest quadrant cut by lines at a and b in an n-square."""
    c, d = n - a, n - b
    return 4 * max(a * b, c * d, a * d, b * c)


def min_erase_operations(text: str, k: int) -> int:
    """Fewest run deletions needed to erase text over an alphabet of k letters."""
    if k < 0:
        raise ValueError("k must be non-negative")
    ids: dict[str, int] = {}
    letters = [ids.setdefault(c, len(ids)) for c in text]
    length = len(letters)
    if k == 0:
        return length

    @cache
    def solve(mask: int) -> int:
        if mask == 0:
            return 0
        runs = Counter(
            letter for letter, _ in groupby(c for c in letters if mask >> c & 1)
        )
        best = length
        for letter, cost in runs.items():
            best = min(best, cost + solve(mask ^ (1 << letter)))
        return best

    return min(length, solve((1 << k) - 1))


def _run_river(reader: _Reader) -> str:
    out = []
    for _ in range(reader.number()):
        limit = reader.number()
        lanes, _width = reader.number(), reader.number()
        grid = [reader.word() for _ in range(lanes + 2)]
        turns = river_crossing(limit, grid)
        if turns is None:
            out.append("The problem has no solution.\n")
        else:
            out.append(f"The minimum number of turns is {turns}.\n")
    return "".join(out)


def run(problem: str, text: str) -> str:
    """Solve the named problem for the given input text."""
    reader = _Reader(text)
    if problem == "a":
        n, m = reader.number(), reader.number()
        edges = [(reader.number(), reader.number()) for _ in range(m)]
        return f"{count_independent_sets(n, edges)}\n"
    if problem == "b":
        players, rounds = reader.number(), reader.number()
        preferences = [
            [reader.word() for _ in range(reader.number())] for _ in range(players)
        ]
        common = [reader.word() for _ in range(reader.number())]
        picks = draft_picks(preferences, rounds, common)
        return "".join("".join(f"{name} " for name in row) + "\n" for row in picks)
    if problem == "c":
        return _run_river(reader)
    if problem == "d":
        grid = [reader.word() for _ in range(6)]
        return "can fold\n" if cube_net_folds(grid) else "cannot fold\n"
    if problem == "e":
        n, m = reader.number(), reader.number()
        values = {}
        for _ in range(n):
            word = reader.word()
            values[word] = reader.number()
        sentences = [list(iter(reader.word, ".")) for _ in range(m)]
        return "".join(f"{v}\n" for v in sentence_values(values, sentences))
    if problem == "i":
        n = reader.number()
        counts = [reader.number() for _ in range(n - 1)]
        return "".join(f"{p} " for p in arrival_order(counts)) + "\n"
    if problem == "m":
        n, a, b = reader.number(), reader.number(), reader.number()
        return f"{max_rectangle_area(n, a, b)}\n"
    if problem == "r":
        n, k = reader.number(), reader.number()
        return f"{min_erase_operations(reader.word()[:n], k)}\n"
    raise ValueError(f"unknown problem {problem!r}")