"""Grid, sequence and simulation solvers with their stdin-style runners."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import chain, combinations

from .arithmetic import _collect, _Scanner, _trunc_divmod

_HEADINGS = "NESW"
_STEPS = {"N": (0, 1), "E": (1, 0), "S": (0, -1), "W": (-1, 0)}

_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
# A day of each month in 2011 that fell on a Monday (March uses day 0).
_MONDAYS_2011 = (10, 21, 0, 4, 9, 6, 11, 8, 5, 10, 7, 12)


class _Chars:
    """Adds single-character reads on top of a token scanner."""

    def __init__(self, scan: _Scanner) -> None:
        self._scan = scan
        self._pending = ""

    def read_word(self) -> str:
        if self._pending:
            word, self._pending = self._pending, ""
            return word
        return self._scan.read_word()

    def read_int(self) -> int:
        token = self.read_word()
        try:
            return int(token)
        except ValueError:
            raise EOFError from None

    def read_char(self) -> str:
        if not self._pending:
            self._pending = self._scan.read_word()
        ch, self._pending = self._pending[0], self._pending[1:]
        return ch


# --- Jolly Jumpers --------------------------------------------------------

def is_jolly(seq: Sequence[int]) -> bool:
    """Whether adjacent differences cover each of 1..n-1 exactly once."""
    n = len(seq)
    seen: set[int] = set()
    for prev, cur in zip(seq, seq[1:]):
        diff = abs(cur - prev)
        if diff < 1 or diff >= n or diff in seen:
            return False
        seen.add(diff)
    return True


def run_10038(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            count = scan.read_int()
            seq = [scan.read_int() for _ in range(count)]
            yield "Jolly" if is_jolly(seq) else "Not jolly"

    return _collect(solve, text)


# --- Hartals --------------------------------------------------------------

def hartal_days(days: int, params: Iterable[int]) -> int:
    """Working days lost to strikes; Fridays and Saturdays are never lost."""
    params = list(params)
    return sum(
        1
        for day in range(1, days + 1)
        if day % 7 not in (6, 0) and any(day % h == 0 for h in params)
    )


def run_10050(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        for _ in range(scan.read_int()):
            days, parties = scan.read_int(), scan.read_int()
            params = [scan.read_int() for _ in range(parties)]
            yield str(hartal_days(days, params))

    return _collect(solve, text)


# --- Minesweeper ----------------------------------------------------------

def minesweeper(rows: Sequence[str]) -> list[str]:
    """Replace each safe cell with the number of mines around it."""
    height = len(rows)

    def is_mine(r: int, c: int) -> bool:
        return 0 <= r < height and 0 <= c < len(rows[r]) and rows[r][c] == "*"

    def cell(r: int, c: int, ch: str) -> str:
        if ch == "*":
            return "*"
        return str(sum(is_mine(r + dr, c + dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1)))

    return ["".join(cell(r, c, ch) for c, ch in enumerate(row)) for r, row in enumerate(rows)]


def run_10189(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        chars = _Chars(scan)
        case = 1
        while True:
            n, m = chars.read_int(), chars.read_int()
            if not (n > 0 and m > 0):
                return
            if case > 1:
                yield ""
            rows = ["".join(chars.read_char() for _ in range(m)) for _ in range(n)]
            yield f"Field #{case}:"
            yield from minesweeper(rows)
            case += 1

    return _collect(solve, text)


# --- Die Game -------------------------------------------------------------

def die_top(commands: Iterable[str]) -> int:
    """Face on top after tilting a standard die by the given directions."""
    top, north, west, east, south, bottom = 1, 2, 3, 4, 5, 6
    for command in commands:
        match command[:1]:
            case "n":
                top, south, bottom, north = south, bottom, north, top
            case "s":
                top, north, bottom, south = north, bottom, south, top
            case "e":
                top, west, bottom, east = west, bottom, east, top
            case "w":
                top, east, bottom, west = east, bottom, west, top
    return top


def run_10409(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            count = scan.read_int()
            if count <= 0:
                return
            yield str(die_top([scan.read_word() for _ in range(count)]))

    return _collect(solve, text)


# --- Largest Square -------------------------------------------------------

def largest_square(grid: Sequence[str], r: int, c: int) -> int:
    """Side of the largest uniform square centred on (r, c)."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if not (0 <= r < rows and 0 <= c < cols):
        raise IndexError("centre lies outside the grid")
    centre = grid[r][c]
    length = 1
    while True:
        top, bottom, left, right = r - length, r + length, c - length, c + length
        if top < 0 or bottom >= rows or left < 0 or right >= cols:
            return length * 2 - 1
        ring = chain(
            (grid[top][j] for j in range(left, right + 1)),
            (grid[bottom][j] for j in range(left, right + 1)),
            (grid[i][left] for i in range(top, bottom + 1)),
            (grid[i][right] for i in range(top, bottom + 1)),
        )
        if any(ch != centre for ch in ring):
            return length * 2 - 1
        length += 1


def run_10908(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        chars = _Chars(scan)
        for _ in range(chars.read_int()):
            m, n, q = chars.read_int(), chars.read_int(), chars.read_int()
            grid = ["".join(chars.read_char() for _ in range(n)) for _ in range(m)]
            yield f"{m} {n} {q}"
            for _ in range(q):
                r, c = chars.read_int(), chars.read_int()
                yield str(largest_square(grid, r, c))

    return _collect(solve, text)


# --- Sort! Sort!! and Sort!!! ---------------------------------------------

def sort_by_modulo(nums: Iterable[int], m: int) -> list[int]:
    """Order by remainder; on ties odd before even, odds descending, evens ascending."""

    def key(value: int) -> tuple[int, int, int]:
        _, remainder = _trunc_divmod(value, m)
        if value & 1:
            return remainder, 0, -value
        return remainder, 1, value

    return sorted(nums, key=key)


def run_11321(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            n, m = scan.read_int(), scan.read_int()
            if n == 0:
                return
            yield f"{n} {m}"
            nums = [scan.read_int() for _ in range(n)]
            yield from map(str, sort_by_modulo(nums, m))

    return _collect(solve, text) + "0 0\n"


# --- Symmetric Matrix -----------------------------------------------------

def is_symmetric(matrix: Sequence[Sequence[int]]) -> bool:
    """Non-negative and unchanged by a half-turn about the centre."""
    if any(value < 0 for row in matrix for value in row):
        return False
    n = len(matrix)
    return all(
        matrix[i][j] == matrix[n - 1 - i][n - 1 - j]
        for i in range(n // 2 + 1)
        for j in range(n - i)
    )


def run_11349(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        chars = _Chars(scan)
        for case in range(1, chars.read_int() + 1):
            chars.read_char()
            chars.read_char()
            n = chars.read_int()
            matrix = [[chars.read_int() for _ in range(n)] for _ in range(n)]
            verdict = "Symmetric." if is_symmetric(matrix) else "Non-symmetric."
            yield f"Test #{case}: {verdict}"

    return _collect(solve, text)


# --- Mutant Flatworld Explorers -------------------------------------------

class Flatworld:
    """A bounded grid that remembers where robots fell off."""

    def __init__(self, max_x: int, max_y: int) -> None:
        self.max_x = max_x
        self.max_y = max_y
        self.scents: set[tuple[int, int]] = set()

    def move(self, x: int, y: int, facing: str, commands: str) -> tuple[int, int, str, bool]:
        """Run a robot's commands; return its final x, y, heading and whether it was lost."""
        heading = _HEADINGS.index(facing) if facing in _HEADINGS else 3
        for command in commands:
            if command == "L":
                heading = (heading - 1) % 4
            elif command == "R":
                heading = (heading + 1) % 4
            else:
                dx, dy = _STEPS[_HEADINGS[heading]]
                nx, ny = x + dx, y + dy
                if 0 <= nx <= self.max_x and 0 <= ny <= self.max_y:
                    x, y = nx, ny
                elif (x, y) not in self.scents:
                    self.scents.add((x, y))
                    return x, y, _HEADINGS[heading], True
        return x, y, _HEADINGS[heading], False


def run_118(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        chars = _Chars(scan)
        world = Flatworld(chars.read_int(), chars.read_int())
        while True:
            x, y, facing = chars.read_int(), chars.read_int(), chars.read_char()
            x, y, facing, lost = world.move(x, y, facing, chars.read_word())
            yield f"{x} {y} {facing}" + (" LOST" if lost else "")

    return _collect(solve, text)


# --- Doom's Day Algorithm -------------------------------------------------

def day_of_week(month: int, day: int) -> str:
    """Weekday name of the given date in 2011."""
    if not 1 <= month <= 12:
        raise ValueError("month must be between 1 and 12")
    return _WEEKDAYS[(day - _MONDAYS_2011[month - 1]) % 7]


def run_12019(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        for _ in range(scan.read_int()):
            month, day = scan.read_int(), scan.read_int()
            yield day_of_week(month, day)

    return _collect(solve, text)


# --- Train Swapping -------------------------------------------------------

def train_swaps(cars: Sequence[int]) -> int:
    """Adjacent swaps a bubble sort needs to order the carriages."""
    return sum(1 for first, second in combinations(cars, 2) if first > second)


def run_299(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            for _ in range(scan.read_int()):
                length = scan.read_int()
                cars = [scan.read_int() for _ in range(length)]
                yield f"Optimal train swapping takes {train_swaps(cars)} swaps."

    return _collect(solve, text)