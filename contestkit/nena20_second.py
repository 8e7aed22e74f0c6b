"""Card moves, triangle sets, subtree counts, common orders, painting, digits and spans."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from string import ascii_uppercase, digits as _DECIMAL, hexdigits

_CAP = 1 << 61
_MODULUS = 998_244_353
_HEX = frozenset(hexdigits.lower())
_DIGITS = frozenset(_DECIMAL)


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


class _Fenwick:
    """Counts of marked positions with prefix queries."""

    def __init__(self, size: int) -> None:
        self._tree = [0] * (size + 1)

    def mark(self, index: int) -> None:
        i = index + 1
        while i < len(self._tree):
            self._tree[i] += 1
            i += i & -i

    def count_below(self, index: int) -> int:
        total = 0
        i = index
        while i > 0:
            total += self._tree[i]
            i -= i & -i
        return total


def count_moves(values: Sequence[int]) -> int:
    """Total moves to build the sorted row, placing cards from the largest down."""
    values = list(values)
    ranks = {v: r for r, v in enumerate(sorted(set(values)))}
    order = sorted(range(len(values)), key=lambda i: (values[i], i), reverse=True)
    positions = _Fenwick(len(values))
    right = _Fenwick(len(ranks))
    left_seen: set[int] = set()
    right_seen: set[int] = set()
    total = 0
    for index in order:
        value = values[index]
        pos = positions.count_below(index)
        above = len(right_seen) - right.count_below(ranks[value] + 1)
        gap = abs(pos - (len(left_seen) + above))
        total += min(pos, gap)
        positions.mark(index)
        if pos < gap:
            left_seen.add(value)
        elif value not in right_seen:
            right_seen.add(value)
            right.mark(ranks[value])
    return total


def count_triangle_sets(lengths: Iterable[int]) -> int:
    """Count stick sets whose two shortest together exceed every other stick."""
    ordered = sorted(lengths)
    total = 0
    for i, shortest in enumerate(ordered):
        for j, second in enumerate(ordered[i + 1 :], start=i + 1):
            fitting = bisect_left(ordered, shortest + second, j + 1) - (j + 1)
            total += (1 << fitting) - 1
    return total


def _tree_order(n: int, edges: Iterable[tuple[int, int]]) -> tuple[list[int], list[list[int]]]:
    adjacent: list[list[int]] = [[] for _ in range(n)]
    count = 0
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) out of range")
        adjacent[a - 1].append(b - 1)
        adjacent[b - 1].append(a - 1)
        count += 1
    if count != n - 1:
        raise ValueError("a tree on n nodes needs n - 1 edges")
    seen = [False] * n
    seen[0] = True
    order = []
    children: list[list[int]] = [[] for _ in range(n)]
    stack = [0]
    while stack:
        u = stack.pop()
        order.append(u)
        for v in adjacent[u]:
            if not seen[v]:
                seen[v] = True
                children[u].append(v)
                stack.append(v)
    if len(order) != n:
        raise ValueError("edges must form a connected tree")
    return order, children


def min_subtree_size(n: int, k: int, edges: Iterable[tuple[int, int]]) -> int | None:
    """Smallest size s such that at least k connected subtrees have size at most s."""
    if n < 1:
        raise ValueError("tree must have at least one node")
    order, children = _tree_order(n, edges)
    totals = [0] * (n + 1)
    counts: dict[int, list[int]] = {}
    for u in reversed(order):
        current = [0, 1]
        for v in children[u]:
            child = counts.pop(v)
            merged = current + [0] * (len(child) - 1)
            for j, ways in enumerate(child):
                if not ways:
                    continue
                for size, own in enumerate(current):
                    if own:
                        merged[j + size] = min(merged[j + size] + ways * own, _CAP)
            current = merged
        counts[u] = current
        for size, ways in enumerate(current):
            totals[size] = min(totals[size] + ways, _CAP)
    running = 0
    for size, ways in enumerate(totals):
        running = min(running + ways, _CAP)
        if running >= k:
            return size
    return None


def longest_common_order(sequences: Sequence[str], size: int) -> int:
    """Longest chain of letters that appear in the same order in every sequence."""
    if not 1 <= size <= len(ascii_uppercase):
        raise ValueError("size must lie in 1..26")
    if not sequences:
        raise ValueError("need at least one sequence")
    letters = sorted(ascii_uppercase[:size])
    if any(sorted(s) != letters for s in sequences):
        raise ValueError("each sequence must order the first size letters once each")
    positions = [{c: p for p, c in enumerate(s)} for s in sequences]
    best: dict[str, int] = {}
    for letter in sequences[0]:
        best[letter] = 1 + max(
            (
                chain
                for earlier, chain in best.items()
                if all(pos[letter] > pos[earlier] for pos in positions)
            ),
            default=0,
        )
    return max(best.values())


def _moves(adjacent, colour, red: int, blue: int, yellow: int):
    for v in adjacent.get(red, ()):
        key = frozenset((red, v))
        col = colour[key]
        if col in ("R", "X"):
            yield key, (v, blue, yellow)
        if col == "P" and red == blue:
            yield key, (v, v, yellow)
        if col == "O" and red == yellow:
            yield key, (v, blue, v)
    for v in adjacent.get(blue, ()):
        key = frozenset((blue, v))
        col = colour[key]
        if col in ("B", "X"):
            yield key, (red, v, yellow)
        if col == "G" and blue == yellow:
            yield key, (red, v, v)
    for v in adjacent.get(yellow, ()):
        key = frozenset((yellow, v))
        if colour[key] in ("Y", "X"):
            yield key, (red, blue, v)


def can_paint_all(
    start: tuple[int, int, int], edges: Iterable[tuple[int, int, str]]
) -> bool:
    """Tell whether red, blue and yellow painters can cover every coloured edge."""
    colour: dict[frozenset[int], str] = {}
    needed: set[frozenset[int]] = set()
    adjacent: defaultdict[int, list[int]] = defaultdict(list)
    for u, v, col in edges:
        key = frozenset((u, v))
        colour[key] = col
        if col != "X":
            needed.add(key)
        adjacent[u].append(v)
        adjacent[v].append(u)
    state = tuple(start)
    seen = {state}
    stack = [state]
    painted: set[frozenset[int]] = set()
    while stack:
        red, blue, yellow = stack.pop()
        for key, following in _moves(adjacent, colour, red, blue, yellow):
            painted.add(key)
            if following not in seen:
                seen.add(following)
                stack.append(following)
    return needed <= painted


def _check_decimal(number: str) -> None:
    if not number or not set(number) <= _DIGITS:
        raise ValueError(f"{number!r} is not a decimal number")


def _is_smooth(number: str) -> bool:
    return all(a != b for a, b in zip(number, number[1:]))


def _count_up_to(number: str) -> int:
    length = len(number)
    powers = [1]
    for _ in range(length):
        powers.append(powers[-1] * 9 % _MODULUS)
    total = sum(powers[1:length]) % _MODULUS
    previous = None
    for position, digit in enumerate(int(c) for c in number):
        smaller = sum(
            1
            for candidate in range(digit)
            if candidate != previous and not (position == 0 and candidate == 0)
        )
        total += smaller * powers[length - position - 1]
        if digit == previous or (position == 0 and digit == 0):
            break
        previous = digit
    else:
        total += 1
    return total % _MODULUS


def count_non_annoying(low: str, high: str) -> int:
    """Numbers in [low, high] with no two equal neighbouring digits, modulo 998244353."""
    _check_decimal(low)
    _check_decimal(high)
    result = _count_up_to(high) - _count_up_to(low) + _is_smooth(low)
    return result % _MODULUS


def _parse_hex(text: str, k: int) -> int:
    if len(text) > k or not set(text) <= _HEX:
        raise ValueError(f"{text!r} is not a lowercase hex string of at most {k} digits")
    return sum(int(c, 16) << (4 * i) for i, c in enumerate(text))


def first_span_days(
    words: Sequence[str], targets: Sequence[str], k: int
) -> list[int | None]:
    """First day (1-based) each target is an xor of some received words, or None."""
    if k <= 0:
        raise ValueError("k must be positive")
    vectors = [_parse_hex(w, k) for w in words]
    residual = [_parse_hex(t, k) for t in targets]
    zero_target = [r == 0 for r in residual]
    days: list[int | None] = [None] * len(targets)
    basis: list[tuple[int, int]] = []
    dependent = False
    for day, vector in enumerate(vectors, start=1):
        for pivot, base in basis:
            if vector >> pivot & 1:
                vector ^= base
        added = None
        if vector == 0:
            dependent = True
        else:
            added = ((vector & -vector).bit_length() - 1, vector)
            basis.append(added)
        for i, found in enumerate(days):
            if found is not None:
                continue
            if zero_target[i]:
                if dependent:
                    days[i] = day
                continue
            if added is not None and residual[i] >> added[0] & 1:
                residual[i] ^= added[1]
            if residual[i] == 0:
                days[i] = day
    return days


def run(problem: str, text: str) -> str:
    """Solve the named problem for the given input text."""
    reader = _Reader(text)
    if problem == "h":
        values = [reader.number() for _ in range(reader.number())]
        return f"{count_moves(values)}\n"
    if problem == "i":
        lengths = [reader.number() for _ in range(reader.number())]
        return f"{count_triangle_sets(lengths)}\n"
    if problem == "j":
        n, k = reader.number(), reader.number()
        edges = [(reader.number(), reader.number()) for _ in range(n - 1)]
        size = min_subtree_size(n, k, edges)
        return f"{-1 if size is None else size}\n"
    if problem == "k":
        n, size = reader.number(), reader.number()
        sequences = [reader.word()[:size] for _ in range(n)]
        return f"{longest_common_order(sequences, size)}\n"
    if problem == "l":
        reader.number()
        m = reader.number()
        start = (reader.number(), reader.number(), reader.number())
        edges = [(reader.number(), reader.number(), reader.word()) for _ in range(m)]
        return "1\n" if can_paint_all(start, edges) else "0\n"
    if problem == "m":
        low, high = reader.word(), reader.word()
        return f"{count_non_annoying(low, high)}\n"
    if problem == "n":
        n, m, k = reader.number(), reader.number(), reader.number()
        words = [reader.word() for _ in range(n)]
        targets = [reader.word() for _ in range(m)]
        days = first_span_days(words, targets, k)
        return "".join(f"{-1 if d is None else d}\n" for d in days)
    raise ValueError(f"unknown problem {problem!r}")