"""Score ranges, recipes, exams, keypads, chains, stacks and subset sums."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, product

_INT_MAX = 2_147_483_647
_SPREAD = 3.0
_DIGITS = frozenset("0123456789")
_KEYS = range(1, 10)


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


def average_range(n: int, scores: Sequence[int]) -> tuple[float, float]:
    """Lowest and highest possible average when the missing scores lie in [-3, 3]."""
    missing = n - len(scores)
    if n <= 0 or missing < 0:
        raise ValueError("need 0 < len(scores) <= n")
    total = sum(scores, 0.0)
    return (total + -_SPREAD * missing) / n, (total + _SPREAD * missing) / n


def max_revenue(
    stock: Sequence[int], recipes: Iterable[tuple[Sequence[int], int]]
) -> int:
    """Best revenue from making a single recipe as many times as stock allows."""
    if any(have < 0 for have in stock):
        raise ValueError("stock must be non-negative")
    best = 0
    for amounts, price in recipes:
        if len(amounts) != len(stock):
            raise ValueError("recipe must list one amount per ingredient")
        batches = min(
            (have // need for have, need in zip(stock, amounts) if need > 0),
            default=_INT_MAX,
        )
        best = max(best, price * min(batches, _INT_MAX))
    return best


def best_exam_score(exams: Sequence[str]) -> int:
    """Highest guaranteed score against every T/F answer sheet over all answer keys."""
    if not exams:
        raise ValueError("need at least one exam")
    width = len(exams[0])
    if any(len(exam) != width for exam in exams):
        raise ValueError("exams must have equal length")
    sheets = [[c == "T" for c in exam] for exam in exams]
    return max(
        min(sum(a == b for a, b in zip(sheet, key)) for sheet in sheets)
        for key in product((False, True), repeat=width)
    )


def keypad_cost(digits: str) -> int:
    """Least typing cost over all one-row layouts of the keys 1 to 9."""
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("expected a non-empty string of digits")
    sequence = [int(c) for c in digits]
    weight = [[0] * 10 for _ in range(10)]
    constant = 0
    for (a, b), count in Counter(zip(sequence, sequence[1:])).items():
        if a == 0 or b == 0:
            continue
        constant += count
        if a != b:
            weight[a][b] += count
            weight[b][a] += count
    full = (1 << 9) - 1
    cut = [
        sum(
            weight[a][b]
            for a in _KEYS
            if mask >> (a - 1) & 1
            for b in _KEYS
            if not mask >> (b - 1) & 1
        )
        for mask in range(full + 1)
    ]
    first = sequence[0]
    best = [math.inf] * (full + 1)
    best[0] = 0
    for mask in range(full + 1):
        if best[mask] == math.inf:
            continue
        placed = mask.bit_count()
        for key in _KEYS:
            bit = 1 << (key - 1)
            if mask & bit:
                continue
            cost = best[mask] + cut[mask | bit] + (placed if key == first else 0)
            if cost < best[mask | bit]:
                best[mask | bit] = cost
    return int(best[full]) + constant + (1 if first != 0 else 0)


def sum_chain_starts(values: Iterable[int]) -> int:
    """Sum the values that do not directly follow their predecessor in sorted order."""
    total = 0
    previous = None
    for value in sorted(values):
        if previous is None or value != previous + 1:
            total += value
        previous = value
    return total


def stack_costs(n: int, requests: Iterable[int]) -> list[int]:
    """After each request, the total time every one of n items has spent unrequested."""
    latest: dict[int, int] = {}
    latest_total = 0
    costs = []
    for step, item in enumerate(requests, start=1):
        latest_total += step - latest.get(item, 0)
        latest[item] = step
        costs.append(n * step - latest_total)
    return costs


def best_subset_sum(capacity: int, values: Sequence[int]) -> int:
    """Smallest sum among the packings that stop once nothing more can be added."""
    items = sorted(values, reverse=True)
    if not items:
        return capacity
    suffix = list(accumulate(reversed(items)))[::-1]
    smallest = items[-1]
    best = capacity
    layer = {0}
    for index, item in enumerate(items):
        following: set[int] = set()
        for total in layer:
            if suffix[index] + total <= capacity:
                best = min(best, suffix[index] + total)
                continue
            if total + smallest > capacity:
                best = min(best, total)
                continue
            following.add(total)
            if total + item <= capacity:
                following.add(total + item)
        layer = following
    return best


def run(problem: str, text: str) -> str:
    """Solve the named problem for the given input text."""
    reader = _Reader(text)
    if problem == "a":
        n, k = reader.number(), reader.number()
        low, high = average_range(n, [reader.number() for _ in range(k)])
        return f"{low:g} {high:g}\n"
    if problem == "b":
        k, r = reader.number(), reader.number()
        stock = [reader.number() for _ in range(k)]
        recipes = []
        for _ in range(r):
            amounts = [reader.number() for _ in range(k)]
            recipes.append((amounts, reader.number()))
        return f"{max_revenue(stock, recipes)}\n"
    if problem == "c":
        n, k = reader.number(), reader.number()
        exams = [reader.word()[:k] for _ in range(n)]
        return f"{best_exam_score(exams)}\n"
    if problem == "d":
        return f"{keypad_cost(reader.word())}\n"
    if problem == "e":
        values = [reader.number() for _ in range(reader.number())]
        return f"{sum_chain_starts(values)}\n"
    if problem == "f":
        n, m = reader.number(), reader.number()
        requests = [reader.number() for _ in range(m)]
        return "".join(f"{c}\n" for c in stack_costs(n, requests))
    if problem == "g":
        n, capacity = reader.number(), reader.number()
        values = [reader.number() for _ in range(n)]
        return str(best_subset_sum(capacity, values))
    raise ValueError(f"unknown problem {problem!r}")