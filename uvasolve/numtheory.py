"""Number-theory and numeral-system solvers with their stdin-style runners."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from itertools import combinations

from .arithmetic import _collect, _Scanner

_KUTI = 10_000_000
_LAKH = 100_000
_HAJAR = 1_000
_SHATA = 100

_FIBONACCI_TERMS = 39


def _fibonacci_weights() -> list[int]:
    weights = [1, 2]
    while len(weights) < _FIBONACCI_TERMS:
        weights.append(weights[-1] + weights[-2])
    return weights


_FIB = _fibonacci_weights()


def _digits(n: int, base: int) -> list[int]:
    """Digits of a non-negative n in the given base, most significant first."""
    digits: list[int] = []
    while n:
        n, digit = divmod(n, base)
        digits.append(digit)
    return digits[::-1]


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    return all(n % d for d in range(3, math.isqrt(n) + 1, 2))


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("a non-negative integer is required")


# --- Funny Encryption Method ---------------------------------------------

def funny_encryption_bits(n: int) -> tuple[int, int]:
    """Ones in n read as decimal, and ones in n's decimal digits read as hex."""
    _require_non_negative(n)
    b1 = bin(n).count("1")
    b2 = sum(bin(int(digit)).count("1") for digit in str(n))
    return b1, b2


def run_10019(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        for _ in range(scan.read_int()):
            b1, b2 = funny_encryption_bits(scan.read_int())
            yield f"{b1} {b2}"

    return _collect(solve, text)


# --- Divide, But Not Quite Conquer! --------------------------------------

def divide_sequence(n: int, m: int) -> list[int] | None:
    """The sequence n, n/m, ..., 1 when n is a power of m, else None."""
    if m <= 1:
        return None
    power = m
    while power < n:
        power *= m
    if power != n:
        return None
    sequence: list[int] = []
    while power > 0:
        sequence.append(power)
        power //= m
    return sequence


def run_10190(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            n, m = scan.read_int(), scan.read_int()
            sequence = divide_sequence(n, m)
            yield "Boring!" if sequence is None else " ".join(map(str, sequence))

    return _collect(solve, text)


# --- All You Need Is Love -------------------------------------------------

def love_possible(s1: str, s2: str) -> bool:
    """Whether both binary strings are multiples of one value larger than 1."""
    return math.gcd(int(s1, 2), int(s2, 2)) > 1


def run_10193(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        for case in range(1, scan.read_int() + 1):
            s1, s2 = scan.read_word(), scan.read_word()
            if love_possible(s1, s2):
                yield f"Pair #{case}: All you need is love!"
            else:
                yield f"Pair #{case}: Love is not all you need!"

    return _collect(solve, text)


# --- Simply Emirp ---------------------------------------------------------

def emirp_status(n: int) -> str:
    """One of "not prime", "prime" or "emirp" for the given number."""
    if not _is_prime(n):
        return "not prime"
    reversed_n = int(str(n)[::-1])
    if reversed_n != n and _is_prime(reversed_n):
        return "emirp"
    return "prime"


def run_10235(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            n = scan.read_int()
            yield f"{n} is {emirp_status(n)}."

    return _collect(solve, text)


# --- 2 the 9s -------------------------------------------------------------

def nine_degree(digits: str) -> int | None:
    """The 9-degree of a decimal number, or None if it is not a multiple of 9."""
    degree = 0
    while True:
        total = sum(int(ch) for ch in digits)
        degree += 1
        if total == 9:
            return degree
        if total < 9:
            return None
        digits = str(total)


def run_10922(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            digits = scan.read_word()
            if digits == "0":
                return
            degree = nine_degree(digits)
            if degree is None:
                yield f"{digits} is not a multiple of 9."
            else:
                yield f"{digits} is a multiple of 9 and has 9-degree {degree}."

    return _collect(solve, text)


# --- You can say 11 -------------------------------------------------------

def is_multiple_of_eleven(digits: str) -> bool:
    """Alternating digit-sum test for divisibility by 11."""
    values = [int(ch) for ch in digits]
    return (sum(values[1::2]) - sum(values[0::2])) % 11 == 0


def run_10929(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            digits = scan.read_word()
            if digits == "0":
                return
            verdict = "is" if is_multiple_of_eleven(digits) else "is not"
            yield f"{digits} {verdict} a multiple of 11."

    return _collect(solve, text)


# --- Parity ---------------------------------------------------------------

def parity(n: int) -> tuple[str, int]:
    """Binary form of n and the number of ones in it; empty for n <= 0."""
    if n <= 0:
        return "", 0
    binary = format(n, "b")
    return binary, binary.count("1")


def run_10931(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            n = scan.read_int()
            if n == 0:
                return
            binary, ones = parity(n)
            yield f"The parity of {binary} is {ones} (mod 2)."

    return _collect(solve, text)


# --- Summing Digits -------------------------------------------------------

def digital_root(n: int) -> int:
    """Repeatedly sum the decimal digits until a single digit remains."""
    _require_non_negative(n)
    while True:
        n = sum(int(ch) for ch in str(n))
        if n < 10:
            return n


def run_11332(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            n = scan.read_int()
            if n == 0:
                return
            yield str(digital_root(n))

    return _collect(solve, text)


# --- GCD ------------------------------------------------------------------

def gcd_sum(n: int) -> int:
    """Sum of gcd(i, j) over all 1 <= i < j <= n."""
    return sum(math.gcd(i, j) for i, j in combinations(range(1, n + 1), 2))


def run_11417(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            n = scan.read_int()
            if n == 0:
                return
            yield str(gcd_sum(n))

    return _collect(solve, text)


# --- Square Numbers -------------------------------------------------------

def count_squares(a: int, b: int) -> int:
    """How many perfect squares lie between a and b inclusive."""
    low = max(a, 0)
    if b < low:
        return 0
    below = math.isqrt(low - 1) if low > 0 else -1
    return math.isqrt(b) - below


def run_11461(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        while True:
            a, b = scan.read_int(), scan.read_int()
            if a == 0 and b == 0:
                return
            yield str(count_squares(a, b))

    return _collect(solve, text)


# --- Fibonaccimal Base ----------------------------------------------------

def fibonaccimal(n: int) -> str:
    """Zeckendorf digits of n over the weights 1, 2, 3, 5, ..., largest first."""
    digits: list[str] = []
    for weight in reversed(_FIB):
        if n - weight >= 0:
            digits.append("1")
            n -= weight
        elif digits:
            digits.append("0")
    return "".join(digits)


def run_948(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        for _ in range(scan.read_int()):
            n = scan.read_int()
            yield f"{n} = {fibonaccimal(n)} (fib)"

    return _collect(solve, text)


# --- An Easy Problem! -----------------------------------------------------

def _base62_value(ch: str) -> int | None:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 36
    return None


def smallest_base(text: str) -> int | None:
    """Smallest base N <= 62 in which the number is divisible by N-1, or None."""
    values = [v for v in map(_base62_value, text) if v is not None]
    largest = max([1, *values])
    total = sum(values)
    for divisor in range(largest, 62):
        if total % divisor == 0:
            return divisor + 1
    return None


def run_10093(text: str) -> str:
    out: list[str] = []
    for line in text.splitlines():
        base = smallest_base(line)
        out.append("such number is impossible!" if base is None else str(base))
    return "".join(f"{line}\n" for line in out)


# --- Bangla Numbers -------------------------------------------------------

def _bangla_parts(n: int) -> list[str]:
    parts: list[str] = []
    if n >= _KUTI:
        parts.extend(_bangla_parts(n // _KUTI))
        parts.append("kuti")
        n %= _KUTI
    for unit, name in ((_LAKH, "lakh"), (_HAJAR, "hajar"), (_SHATA, "shata")):
        if n >= unit:
            parts.extend((str(n // unit), name))
            n %= unit
    if n > 0:
        parts.append(str(n))
    return parts


def bangla(n: int) -> str:
    """Spell n with the kuti, lakh, hajar and shata units."""
    _require_non_negative(n)
    if n == 0:
        return "0"
    return " ".join(_bangla_parts(n))


def run_10101(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        case = 1
        while True:
            n = scan.read_int()
            yield f"{case:>4}. {bangla(n)}"
            case += 1

    return _collect(solve, text)


# --- B2-Sequence ----------------------------------------------------------

def is_b2_sequence(seq: Sequence[int]) -> bool:
    """Positive, strictly increasing, with every pairwise sum distinct."""
    if any(value < 1 for value in seq):
        return False
    if any(prev >= cur for prev, cur in zip(seq, seq[1:])):
        return False
    seen: set[int] = set()
    for j, first in enumerate(seq):
        for second in seq[j:]:
            total = first + second
            if total in seen:
                return False
            seen.add(total)
    return True


def run_11063(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        case = 0
        while True:
            count = scan.read_int()
            case += 1
            seq = [scan.read_int() for _ in range(count)]
            verdict = "is" if is_b2_sequence(seq) else "is not"
            yield f"Case #{case}: It {verdict} a B2-Sequence."
            yield ""

    return _collect(solve, text)


# --- Cheapest Base --------------------------------------------------------

def cheapest_bases(n: int, costs: Sequence[int]) -> list[int]:
    """Bases from 2 to 36 in which printing n costs the least."""
    _require_non_negative(n)
    if len(costs) < 36:
        raise ValueError("a cost is needed for each of the 36 digits")
    prices = {base: sum(costs[d] for d in _digits(n, base)) for base in range(2, 37)}
    cheapest = min(prices.values())
    return [base for base, price in prices.items() if price == cheapest]


def _cost_cases(scan: _Scanner, cases: int) -> Iterable[str]:
    for case in range(1, cases + 1):
        yield f"Case {case}:"
        costs = [scan.read_int() for _ in range(36)]
        for _ in range(scan.read_int()):
            n = scan.read_int()
            bases = "".join(f" {base}" for base in cheapest_bases(n, costs))
            yield f"Cheapest base(s) for number {n}:{bases}"
        if case != cases:
            yield ""


def run_11005(text: str) -> str:
    def solve(scan: _Scanner) -> Iterator[str]:
        yield from _cost_cases(scan, scan.read_int())

    return _collect(solve, text)