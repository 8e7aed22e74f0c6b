"""Min-cost flow tournaments, loser cycles, jump levels and divisor sums."""

from __future__ import annotations

import math
from bisect import bisect_left, insort
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import product

_NO_SCHEDULE = 1 << 61
_SEARCH_LIMIT = 10**9
_MAX_TEAMS = 5
_LEVELS = 29


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


@dataclass(slots=True)
class _Edge:
    source: int
    target: int
    capacity: int
    cost: int
    flow: int = 0

    @property
    def residual(self) -> int:
        return self.capacity - self.flow


class MinCostFlow:
    """Maximum flow of minimum cost, augmenting along cheapest paths."""

    def __init__(self, size: int, source: int, sink: int) -> None:
        if not (0 <= source < size and 0 <= sink < size) or source == sink:
            raise ValueError("source and sink must be distinct nodes of the network")
        self._source = source
        self._sink = sink
        self._adjacent: list[list[int]] = [[] for _ in range(size)]
        self._edges: list[_Edge] = []
        self.flow = 0
        self.cost = 0

    def add_edge(self, source: int, target: int, capacity: int, cost: int) -> None:
        """Add a directed edge together with its empty reverse edge."""
        size = len(self._adjacent)
        if not (0 <= source < size and 0 <= target < size):
            raise ValueError(f"edge ({source}, {target}) out of range")
        self._adjacent[source].append(len(self._edges))
        self._edges.append(_Edge(source, target, capacity, cost))
        self._adjacent[target].append(len(self._edges))
        self._edges.append(_Edge(target, source, 0, -cost))

    def _augment(self) -> bool:
        size = len(self._adjacent)
        distance = [math.inf] * size
        via = [-1] * size
        queued = [False] * size
        distance[self._source] = 0
        queue = deque([self._source])
        queued[self._source] = True
        found = False
        while queue:
            u = queue.popleft()
            if u == self._sink:
                found = True
            queued[u] = False
            for index in self._adjacent[u]:
                edge = self._edges[index]
                if edge.residual > 0 and distance[u] + edge.cost < distance[edge.target]:
                    distance[edge.target] = distance[u] + edge.cost
                    via[edge.target] = index
                    if not queued[edge.target]:
                        queue.append(edge.target)
                        queued[edge.target] = True
        if not found:
            return False
        path = []
        node = self._sink
        while node != self._source:
            path.append(via[node])
            node = self._edges[via[node]].source
        push = min(self._edges[index].residual for index in path)
        for index in path:
            self._edges[index].flow += push
            self._edges[index ^ 1].flow -= push
        self.flow += push
        self.cost += push * distance[self._sink]
        return True

    def solve(self) -> tuple[int, int]:
        """Push as much flow as possible; return (flow, cost)."""
        while self._augment():
            pass
        return self.flow, self.cost


def _tournament_cost(ranked: Sequence[tuple[int, int]], sign: int) -> int:
    n = len(ranked) - 1
    sink = 2 * n + 1
    network = MinCostFlow(2 * n + 2, 0, sink)
    for i in range(1, n + 1):
        if i < n:
            network.add_edge(0, i, 1, 0)
        if i > 1:
            network.add_edge(i + n, sink, ranked[i][1] - (i < n), 0)
        for j in range(i + 1, n + 1):
            network.add_edge(i, j + n, 1, sign * (ranked[i][0] ^ ranked[j][0]))
    return network.solve()[1]


def xor_tournament(players: Iterable[tuple[int, int]]) -> tuple[int, int]:
    """Least and greatest total xor score over maximum pairings of the players."""
    ranked = sorted([(-1, -1), *(tuple(p) for p in players)])
    return _tournament_cost(ranked, 1), -_tournament_cost(ranked, -1)


def _feasible(gaps: Sequence[int], value: int) -> bool:
    spare = 0
    for gap in gaps:
        if gap + value <= 0:
            return False
        spare += (gap + value - 1) // 2
    return spare >= value


def _smallest(parity: int, floor: int, gaps: Sequence[int]) -> int:
    low, high = 0, _SEARCH_LIMIT
    found = _SEARCH_LIMIT
    while low <= high:
        middle = (low + high) // 2
        value = 2 * middle + parity
        if value >= floor and _feasible(gaps, value):
            found = value
            high = middle - 1
        else:
            low = middle + 1
    return found


def _cycle_from_zero(loser: Sequence[int]) -> list[int]:
    position: dict[int, int] = {}
    path: list[int] = []
    node = 0
    while node not in position:
        position[node] = len(path)
        path.append(node)
        node = loser[node]
    return path[position[node]:]


def _games_needed(margin: Sequence[Sequence[int]], loser: Sequence[int]) -> int:
    if any(loser[loser[team]] == team for team in range(len(loser))):
        return _NO_SCHEDULE
    cycle = _cycle_from_zero(loser)
    floor = max(margin[team][beaten] + 1 for team, beaten in enumerate(loser))
    gaps = [-margin[a][b] for a, b in zip(cycle, cycle[1:] + cycle[:1])]
    return min(_smallest(parity, floor, gaps) for parity in (0, 1))


def min_games(n: int, rankings: Iterable[tuple[str, int]]) -> int | None:
    """Fewest games over loser assignments without mutual pairs, or None if none exists."""
    if not 1 <= n <= _MAX_TEAMS:
        raise ValueError(f"n must lie in 1..{_MAX_TEAMS}")
    margin = [[0] * n for _ in range(n)]
    for order, weight in rankings:
        teams = [ord(letter) - ord("A") for letter in order]
        if any(not 0 <= team < n for team in teams):
            raise ValueError(f"ranking {order!r} names an unknown team")
        for j, ahead in enumerate(teams):
            for behind in teams[j + 1 :]:
                margin[ahead][behind] += weight
                margin[behind][ahead] -= weight
    choices = [[other for other in range(n) if other != team] for team in range(n)]
    best = min(
        (_games_needed(margin, loser) for loser in product(*choices)),
        default=_NO_SCHEDULE,
    )
    return None if best >= _NO_SCHEDULE else best


def _level_graph(
    ordered: Sequence[tuple[int, int]], reach: int, k: int
) -> tuple[list[list[int]], list[bool]]:
    nodes = len(ordered)
    adjacent: list[list[int]] = [[] for _ in range(nodes)]
    contains = [False] * nodes
    window: list[int] = []
    left = right = 0
    for value, index in ordered:
        while right < nodes and ordered[right][0] <= value + reach:
            insort(window, ordered[right][1])
            right += 1
        while left < nodes and ordered[left][0] < value - reach:
            del window[bisect_left(window, ordered[left][1])]
            left += 1
        chosen = window[-k:][::-1] if k > 0 else []
        adjacent[index] = chosen
        contains[index] = index in chosen
    return adjacent, contains


def jump_distances(heights: Sequence[int], k: int) -> list[int | None]:
    """Distance to each point over the levelled jump graph, or None if unreachable."""
    if k < 0:
        raise ValueError("k must be non-negative")
    values = [0, *heights]
    nodes = len(values)
    ordered = sorted((value, index) for index, value in enumerate(values))
    graphs = [_level_graph(ordered, 1 << level, k) for level in range(_LEVELS)]
    distance: list[list[int | None]] = [[None] * nodes for _ in range(_LEVELS)]
    distance[0][0] = 0
    queue = deque([(0, 0)])
    while queue:
        level, u = queue.popleft()
        step = distance[level][u] + 1
        for v in graphs[level][0][u]:
            if distance[level][v] is None:
                distance[level][v] = step
                queue.append((level, v))
        for other in (level + 1, level - 1):
            if 0 <= other < _LEVELS and distance[other][u] is None:
                distance[other][u] = step
                queue.append((other, u))
    result: list[int | None] = []
    for node in range(1, nodes):
        candidates = [
            found if graphs[level][1][node] else found + level + 1
            for level in range(_LEVELS)
            if (found := distance[level][node]) is not None
        ]
        result.append(min(candidates, default=None))
    return result


def _totient(value: int) -> int:
    result = value
    rest = value
    prime = 2
    while prime * prime <= rest:
        if rest % prime == 0:
            while rest % prime == 0:
                rest //= prime
            result -= result // prime
        prime += 1
    if rest > 1:
        result -= result // rest
    return result


def _proper_divisors(n: int) -> list[int]:
    found = set()
    d = 1
    while d * d <= n:
        if n % d == 0:
            found.update((d, n // d))
        d += 1
    return sorted(x for x in found if 2 <= x < n)


def count_structures(n: int, modulus: int) -> int:
    """Sum over proper divisors k of (2^(n/k-1) - 1) * phi(k), times n - 2, modulo."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if n < 0:
        raise ValueError("n must be non-negative")
    total = sum(
        (pow(2, n // k - 1, modulus) - 1) % modulus * _totient(k) % modulus
        for k in _proper_divisors(n)
    )
    return total * (n - 2) % modulus


def run(problem: str, text: str) -> str:
    """Solve the named problem for the given input text."""
    reader = _Reader(text)
    if problem == "o":
        players = [(reader.number(), reader.number()) for _ in range(reader.number())]
        low, high = xor_tournament(players)
        return f"{low} {high}\n"
    if problem == "p":
        n, m = reader.number(), reader.number()
        rankings = [(reader.word(), reader.number()) for _ in range(m)]
        games = min_games(n, rankings)
        return f"{_NO_SCHEDULE if games is None else games}\n"
    if problem == "q":
        n, k = reader.number(), reader.number()
        heights = [reader.number() for _ in range(n)]
        return "".join(
            f"{-1 if d is None else d}\n" for d in jump_distances(heights, k)
        )
    if problem == "r":
        n, modulus = reader.number(), reader.number()
        return f"{count_structures(n, modulus)}\n"
    raise ValueError(f"unknown problem {problem!r}")