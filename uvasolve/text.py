"""Text and character-counting solvers with their stdin-style runners."""

from __future__ import annotations

import re
import string
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import takewhile

_WORD = re.compile(r"\S+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_KEYBOARD_ROWS = (
    "~!@#$%^&*()_+",
    "`1234567890-=",
    "qwertyuiop[]\\",
    "asdfghjkl;'",
    "zxcvbnm,./",
)
# Each key decodes to the key two places to its left on the same row.
_KEYBOARD = {typed: meant for row in _KEYBOARD_ROWS for typed, meant in zip(row[2:], row)}

_FINGERING: dict[str, tuple[int, ...]] = {
    "c": (0, 1, 1, 1, 0, 0, 1, 1, 1, 1),
    "d": (0, 1, 1, 1, 0, 0, 1, 1, 1, 0),
    "e": (0, 1, 1, 1, 0, 0, 1, 1, 0, 0),
    "f": (0, 1, 1, 1, 0, 0, 1, 0, 0, 0),
    "g": (0, 1, 1, 1, 0, 0, 0, 0, 0, 0),
    "a": (0, 1, 1, 0, 0, 0, 0, 0, 0, 0),
    "b": (0, 1, 0, 0, 0, 0, 0, 0, 0, 0),
    "C": (0, 0, 1, 0, 0, 0, 0, 0, 0, 0),
    "D": (1, 1, 1, 1, 0, 0, 1, 1, 1, 0),
    "E": (1, 1, 1, 1, 0, 0, 1, 1, 0, 0),
    "F": (1, 1, 1, 1, 0, 0, 1, 0, 0, 0),
    "G": (1, 1, 1, 1, 0, 0, 0, 0, 0, 0),
    "A": (1, 1, 1, 0, 0, 0, 0, 0, 0, 0),
    "B": (1, 1, 0, 0, 0, 0, 0, 0, 0, 0),
}
_FINGERS = 10


class _Reader:
    """Mixes whitespace-separated word reads with whole-line reads."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def word(self) -> str:
        match = _WORD.search(self._text, self._pos)
        if match is None:
            raise EOFError
        self._pos = match.end()
        return match.group()

    def line(self) -> str:
        if self._pos >= len(self._text):
            raise EOFError
        end = self._text.find("\n", self._pos)
        if end == -1:
            end = len(self._text)
        line = self._text[self._pos:end]
        self._pos = end + 1
        return line


def _lines(text: str) -> list[str]:
    """Split into lines the way repeated line reads would see them."""
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return parts


def _emit(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


# --- What's Cryptanalysis? ------------------------------------------------

def letter_frequencies(text: str) -> list[tuple[str, int]]:
    """Upper-case letters with their counts, most frequent first, ties alphabetical.

    Only counts smaller than the number of non-blank characters are reported.
    """
    chars = "".join(text.split())
    counts = Counter(ch.upper() for ch in chars if ch.isascii() and ch.isalpha())
    total = len(chars)
    return sorted(
        ((letter, count) for letter, count in counts.items() if count < total),
        key=lambda item: (-item[1], item[0]),
    )


def run_10008(text: str) -> str:
    return _emit(f"{letter} {count}" for letter, count in letter_frequencies(text))


# --- Tell me the frequencies! ---------------------------------------------

def char_frequencies(line: str) -> list[tuple[int, int]]:
    """Character codes with their counts, rarest first, ties by descending code."""
    counts = Counter(line)
    return sorted(
        ((ord(ch), count) for ch, count in counts.items()),
        key=lambda item: (item[1], -item[0]),
    )


def run_10062(text: str) -> str:
    out: list[str] = []
    for index, line in enumerate(_lines(text)):
        if index:
            out.append("")
        out.extend(f"{code} {count}" for code, count in char_frequencies(line))
    return _emit(out)


# --- Decode the Mad man ---------------------------------------------------

def decode_keyboard(line: str) -> str:
    """Undo typing shifted two keys to the right; unknown keys become NUL."""
    return "".join(" " if ch == " " else _KEYBOARD.get(ch, "\0") for ch in line)


def run_10222(text: str) -> str:
    return _emit(decode_keyboard(line) for line in _lines(text))


# --- Hardwood Species -----------------------------------------------------

def species_percentages(names: Iterable[str]) -> list[tuple[str, float]]:
    """Each distinct name, in sorted order, with its share of all names in percent."""
    counts = Counter(names)
    total = sum(counts.values())
    return [(name, count / total * 100.0) for name, count in sorted(counts.items())]


def run_10226(text: str) -> str:
    match = _LEADING_INT.match(text)
    if match is None:
        return ""
    cases = int(match.group(1))
    lines = iter(_lines(text[match.end():].lstrip()))
    out: list[str] = []
    for remaining in range(cases - 1, -1, -1):
        names = list(takewhile(bool, lines))
        out.extend(f"{name} {share:.4f}" for name, share in species_percentages(names))
        if remaining:
            out.append("")
    return _emit(out)


# --- Common Permutation ---------------------------------------------------

def common_permutation(a: str, b: str) -> str:
    """Lower-case letters present in both strings, as often as in both, sorted."""
    counts_a, counts_b = Counter(a), Counter(b)
    return "".join(
        letter * min(counts_a[letter], counts_b[letter]) for letter in string.ascii_lowercase
    )


def run_10252(text: str) -> str:
    lines = iter(_lines(text))
    return _emit(common_permutation(a, b) for a, b in zip(lines, lines))


# --- TEX Quotes -----------------------------------------------------------

def tex_quotes(lines: Iterable[str]) -> list[str]:
    """Replace straight double quotes with alternating `` and '' across all lines."""
    opening = True
    result: list[str] = []
    for line in lines:
        pieces: list[str] = []
        for ch in line:
            if ch == '"':
                pieces.append("``" if opening else "''")
                opening = not opening
            else:
                pieces.append(ch)
        result.append("".join(pieces))
    return result


def run_272(text: str) -> str:
    return _emit(tex_quotes(_lines(text)))


# --- Rotating Sentences ---------------------------------------------------

def rotate_sentence(lines: Sequence[str]) -> list[str]:
    """Turn lines into columns read top to bottom, last line leftmost."""
    width = max(map(len, lines), default=0)
    return [
        "".join(line[i] if i < len(line) else " " for line in reversed(lines))
        for i in range(width)
    ]


def run_490(text: str) -> str:
    return _emit(rotate_sentence(_lines(text)))


# --- List of Conquests ----------------------------------------------------

def conquest_counts(lines: Iterable[str]) -> list[tuple[str, int]]:
    """Countries (first word of each entry) with their counts, sorted by name."""
    countries = [words[0] for words in (line.split() for line in lines) if words]
    return sorted(Counter(countries).items())


def run_10420(text: str) -> str:
    reader = _Reader(text)
    try:
        count = int(reader.word())
    except (EOFError, ValueError):
        return ""
    entries: list[str] = []
    for _ in range(count):
        try:
            country = reader.word()
        except EOFError:
            break
        try:
            rest = reader.line()
        except EOFError:
            rest = ""
        entries.append(country + rest)
    return _emit(f"{country} {total}" for country, total in conquest_counts(entries))


# --- Eb Alto Saxophone Player ---------------------------------------------

def saxophone_presses(song: str) -> list[int]:
    """How many times each of the ten fingers presses a key while playing the song."""
    try:
        fingerings = [_FINGERING[note] for note in song]
    except KeyError as exc:
        raise ValueError(f"unknown note {exc.args[0]!r}") from None
    if not fingerings:
        return [0] * _FINGERS
    presses = list(fingerings[0])
    for previous, current in zip(fingerings, fingerings[1:]):
        presses = [
            total + (1 if now and not before else 0)
            for total, before, now in zip(presses, previous, current)
        ]
    return presses


def run_10415(text: str) -> str:
    reader = _Reader(text)
    try:
        cases = int(reader.word())
    except (EOFError, ValueError):
        return ""
    try:
        reader.line()
    except EOFError:
        pass
    out: list[str] = []
    for _ in range(cases):
        try:
            song = reader.line()
        except EOFError:
            song = ""
        out.append(" ".join(map(str, saxophone_presses(song))))
    return _emit(out)