"""Arithmetic and plane-geometry solvers with their stdin-style runners."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator, Sequence

EARTH_RADIUS = 6440.0

Point = tuple[float, float]


class _Scanner:
    """Reads whitespace-separated tokens; raises EOFError when input runs out or fails to parse."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def read_word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError from None

    def read_int(self) -> int:
        token = self.read_word()
        try:
            return int(token)
        except ValueError:
            raise EOFError from None

    def read_float(self) -> float:
        token = self.read_word()
        try:
            return float(token)
        except ValueError:
            raise EOFError from None


def _collect(solve: Callable[[_Scanner], Iterator[str]], text: str) -> str:
    """Gather output lines from a solver until its input is exhausted."""
    lines: list[str] = []
    try:
        for line in solve(_Scanner(text)):
            lines.append(line)
    except EOFError:
        pass
    return "".join(f"{line}\n" for line in lines)


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Division that truncates toward zero, with the matching remainder."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def _leading_ints(line: str) -> list[int]:
    values: list[int] = []
    for token in line.split():
        try:
            values.append(int(token))
        except ValueError:
            break
    return values


# --- 3n+1 -----------------------------------------------------------------

def cycle_length(n: int) -> int:
    """Number of terms in the 3n+1 sequence starting at n, counting n and 1."""
    if n < 1:
        raise ValueError("cycle length is defined for positive integers only")
    length = 1
    while n != 1:
        n = n * 3 + 1 if n % 2 else n // 2
        length += 1
    return length


def max_cycle_length(a: int, b: int) -> int:
    """Largest cycle length for any integer between a and b inclusive."""
    low, high = min(a, b), max(a, b)
    return max((cycle_length(k) for k in range(low, high + 1)), default=0)


def run_100(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            a, b = scan.read_int(), scan.read_int()
            yield f"{a} {b} {max_cycle_length(a, b)}"

    return _collect(solve, text)


# --- Primary Arithmetic ---------------------------------------------------

def carry_count(a: int, b: int) -> int:
    """How many carries occur when adding a and b digit by digit."""
    count = carry = 0
    while a or b:
        a, digit_a = _trunc_divmod(a, 10)
        b, digit_b = _trunc_divmod(b, 10)
        carry = 1 if digit_a + digit_b + carry >= 10 else 0
        count += carry
    return count


def carry_message(count: int) -> str:
    if count == 0:
        return "No carry operation."
    if count == 1:
        return "1 carry operation."
    return f"{count} carry operations."


def run_10035(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            a, b = scan.read_int(), scan.read_int()
            if a == 0 and b == 0:
                return
            yield carry_message(carry_count(a, b))

    return _collect(solve, text)


# --- Hashmat the Brave Warrior -------------------------------------------

def run_10055(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            a, b = scan.read_int(), scan.read_int()
            yield str(abs(a - b))

    return _collect(solve, text)


# --- Back to High School Physics -----------------------------------------

def displacement(v: int, t: int) -> int:
    """Distance covered in twice the time t at velocity v."""
    return 2 * v * t


def run_10071(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            v, t = scan.read_int(), scan.read_int()
            yield str(displacement(v, t))

    return _collect(solve, text)


# --- The Hotel with Infinite Rooms ---------------------------------------

def hotel_group_size(first: int, day: int) -> int | None:
    """Size of the group staying on the given day, or None for day zero."""
    size = first
    while day != 0:
        day -= size
        if day <= 0:
            return size
        size += 1
    return None


def run_10170(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            first, day = scan.read_int(), scan.read_int()
            size = hotel_group_size(first, day)
            if size is not None:
                yield str(size)

    return _collect(solve, text)


# --- Odd Sum --------------------------------------------------------------

def odd_sum(a: int, b: int) -> int:
    """Sum of the odd integers from a to b inclusive."""
    start = a + 1 if a % 2 == 0 else a
    return sum(range(start, b + 1, 2))


def run_10783(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        for case in range(1, scan.read_int() + 1):
            a, b = scan.read_int(), scan.read_int()
            yield f"Case {case}: {odd_sum(a, b)}"

    return _collect(solve, text)


# --- Beat the Spread ------------------------------------------------------

def beat_the_spread(total: int, difference: int) -> tuple[int, int] | None:
    """Two scores with the given sum and difference, larger first, or None."""
    a, rem_a = _trunc_divmod(total + difference, 2)
    b, rem_b = _trunc_divmod(total - difference, 2)
    if rem_a == 1 or rem_b == 1 or a < 0 or b < 0:
        return None
    return a, b


def run_10812(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        for _ in range(scan.read_int()):
            total, difference = scan.read_int(), scan.read_int()
            scores = beat_the_spread(total, difference)
            yield "impossible" if scores is None else f"{scores[0]} {scores[1]}"

    return _collect(solve, text)


# --- Cola -----------------------------------------------------------------

def cola_bottles(n: int) -> int:
    """Bottles drunk starting with n, trading three empties for a full one."""
    total = bottles = n
    while bottles >= 3:
        new_cola = bottles // 3
        total += new_cola
        bottles = bottles % 3 + new_cola
    if bottles == 2:
        total += 1
    return total


def run_11150(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            yield str(cola_bottles(scan.read_int()))

    return _collect(solve, text)


# --- Can You Solve It? ----------------------------------------------------

def diagonal_index(x: int, y: int) -> int:
    """Position of (x, y) along the diagonal walk starting at the origin."""
    if x == 0 and y == 0:
        return 0
    n = x + y - 1
    return (n * n + 3 * n) // 2 + (x + 1)


def diagonal_steps(x1: int, y1: int, x2: int, y2: int) -> int:
    return diagonal_index(x2, y2) - diagonal_index(x1, y1)


def run_10642(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        for case in range(1, scan.read_int() + 1):
            x1, y1 = scan.read_int(), scan.read_int()
            x2, y2 = scan.read_int(), scan.read_int()
            yield f"Case {case}: {diagonal_steps(x1, y1, x2, y2)}"

    return _collect(solve, text)


# --- 498' -----------------------------------------------------------------

def derivative_at(x: int, coefficients: Sequence[int]) -> int:
    """Value at x of the derivative of the polynomial, highest power first."""
    degree = len(coefficients) - 1
    return sum(
        coef * power * x ** (power - 1)
        for coef, power in zip(coefficients, range(degree, 0, -1))
    )


def run_10268(text: str) -> str:
    lines = iter(text.splitlines())
    out: list[str] = []
    for x_line in lines:
        x = int(x_line)
        coefficients = _leading_ints(next(lines, ""))
        out.append(str(derivative_at(x, coefficients)))
    return "".join(f"{line}\n" for line in out)


# --- What is the Probability? --------------------------------------------

def win_probability(players: float, p: float, index: float) -> float:
    """Chance that player number index wins when each throw succeeds with p."""
    if p == 0:
        return 0.0
    q = 1.0 - p
    return (q ** (index - 1) * p) / (1.0 - q**players)


def run_10056(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        for _ in range(scan.read_int()):
            players, p, index = scan.read_float(), scan.read_float(), scan.read_float()
            yield f"{win_probability(players, p, index):.4f}"

    return _collect(solve, text)


# --- Satellites -----------------------------------------------------------

def satellite_distances(height: float, angle: float, unit: str) -> tuple[float, float]:
    """Arc and chord distance between two satellites at the given height."""
    if unit == "min":
        angle /= 60.0
    if angle > 180.0:
        angle = 360.0 - angle
    radius = EARTH_RADIUS + height
    chord = radius * math.cos((90.0 - angle / 2.0) / 180.0 * math.pi) * 2.0
    arc = 2.0 * math.pi * radius * angle / 360.0
    return arc, chord


def run_10221(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            height, angle, unit = scan.read_float(), scan.read_float(), scan.read_word()
            arc, chord = satellite_distances(height, angle, unit)
            yield f"{arc:.6f} {chord:.6f}"

    return _collect(solve, text)


# --- Fill the Missing Point -----------------------------------------------

def fourth_vertex(p1: Point, p2: Point, p3: Point, p4: Point) -> Point:
    """Missing corner of a parallelogram given two adjacent sides' endpoints."""
    if p1 == p3:
        shared, (a, b) = p1, (p2, p4)
    elif p1 == p4:
        shared, (a, b) = p1, (p2, p3)
    elif p2 == p3:
        shared, (a, b) = p2, (p1, p4)
    else:
        shared, (a, b) = p2, (p1, p3)
    return (a[0] + b[0]) - shared[0], (a[1] + b[1]) - shared[1]


def run_10242(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            points = [(scan.read_float(), scan.read_float()) for _ in range(4)]
            x, y = fourth_vertex(*points)
            yield f"{x:.3f} {y:.3f}"

    return _collect(solve, text)


# --- Vito's Family --------------------------------------------------------

def vito_distance(streets: Iterable[int]) -> int:
    """Total distance from the median house to every relative."""
    ordered = sorted(streets)
    if not ordered:
        return 0
    median = ordered[len(ordered) // 2]
    return sum(abs(median - street) for street in ordered)


def run_10041(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        for _ in range(scan.read_int()):
            count = scan.read_int()
            yield str(vito_distance([scan.read_int() for _ in range(count)]))

    return _collect(solve, text)


# --- A mid-summer night's dream -------------------------------------------

def midsummer(values: Iterable[int]) -> tuple[int, int, int]:
    """Smallest median, how many values equal a median, and how many medians exist."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("at least one value is required")
    low = ordered[(len(ordered) - 1) // 2]
    high = ordered[len(ordered) // 2]
    hits = sum(1 for value in ordered if value in (low, high))
    return low, hits, high - low + 1


def run_10057(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            count = scan.read_int()
            low, hits, span = midsummer([scan.read_int() for _ in range(count)])
            yield f"{low} {hits} {span}"

    return _collect(solve, text)