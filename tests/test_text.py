from collections import Counter

import pytest

from uvasolve.text import (
    char_frequencies,
    common_permutation,
    conquest_counts,
    decode_keyboard,
    letter_frequencies,
    rotate_sentence,
    run_10008,
    run_10062,
    run_10222,
    run_10226,
    run_10252,
    run_10415,
    run_10420,
    run_272,
    run_490,
    saxophone_presses,
    species_percentages,
    tex_quotes,
)

SAMPLE = "This is a test.\nCount me 1 2 3 4 5.\nWow!!!! Is this question easy?\n"


def test_letter_frequencies_counts_and_order():
    result = letter_frequencies(SAMPLE)
    for letter, count in result:
        assert count == SAMPLE.upper().count(letter)
    counts = [count for _, count in result]
    assert counts == sorted(counts, reverse=True)
    for (l1, c1), (l2, c2) in zip(result, result[1:]):
        if c1 == c2:
            assert l1 < l2
    assert {letter for letter, _ in result} == {ch.upper() for ch in SAMPLE if ch.isalpha()}


def test_letter_frequencies_skips_count_equal_to_total():
    assert letter_frequencies("a A a") == []
    assert letter_frequencies("aa!") == [("A", 2)]


def test_letter_frequencies_ignores_non_letters():
    assert letter_frequencies("1 2 3 ? !") == []


def test_run_10008_lines_match_frequencies():
    lines = run_10008(SAMPLE).splitlines()
    assert lines == [f"{letter} {count}" for letter, count in letter_frequencies(SAMPLE)]


def test_char_frequencies_ties_descending_code():
    assert char_frequencies("abc") == [(ord(c), 1) for c in "cba"]


def test_char_frequencies_invariants():
    line = "AAABBC hello world"
    result = char_frequencies(line)
    assert sum(count for _, count in result) == len(line)
    assert [count for _, count in result] == sorted(count for _, count in result)
    assert {chr(code) for code, _ in result} == set(line)


def test_run_10062_separates_blocks():
    out = run_10062("AAABBC\n122333\n")
    first, second = out.split("\n\n")
    assert len(first.splitlines()) == len(set("AAABBC"))
    assert second.splitlines()[-1] == f"{ord('3')} 3"


def test_decode_keyboard_row_shift():
    assert decode_keyboard("ertyuiop[]\\") == "qwertyuiop["
    assert decode_keyboard("e e") == "q q"


def test_decode_keyboard_unknown_key_gives_nul():
    assert decode_keyboard("A") == "\0"


def test_run_10222_keeps_lines():
    assert run_10222("e\nr\n") == "q\nw\n"


def test_species_percentages_sum_and_order():
    names = ["Red Alder", "Ash", "Aspen", "Ash", "Cherry", "Red Alder", "Ash"]
    result = species_percentages(names)
    assert [name for name, _ in result] == sorted(set(names))
    assert sum(share for _, share in result) == pytest.approx(100.0)
    shares = dict(result)
    assert shares["Ash"] == pytest.approx(3 * shares["Aspen"])


def test_species_percentages_empty():
    assert species_percentages([]) == []


def test_run_10226_cases_and_format():
    out = run_10226("2\n\nOak\nAsh\nOak\n\nElm\n")
    first, second = out.split("\n\n")
    lines = first.splitlines()
    expected = species_percentages(["Oak", "Ash", "Oak"])
    assert [line.split()[0] for line in lines] == [name for name, _ in expected]
    for line, (_, share) in zip(lines, expected):
        value = line.split()[1]
        assert len(value.split(".")[1]) == 4
        assert float(value) == pytest.approx(share, abs=1e-4)
    assert second.split()[0] == "Elm"


def test_common_permutation_invariants():
    a, b = "walking", "down the street"
    result = common_permutation(a, b)
    assert result == common_permutation(b, a)
    assert list(result) == sorted(result)
    assert not Counter(result) - Counter(a)
    assert not Counter(result) - Counter(b)


def test_common_permutation_self_and_empty():
    assert common_permutation("pretty", "pretty") == "".join(sorted("pretty"))
    assert common_permutation("pretty", "") == ""


def test_run_10252_pairs_lines():
    out = run_10252("abc\nabc\nzz\nz\ndangling\n").splitlines()
    assert out == [common_permutation("abc", "abc"), common_permutation("zz", "z")]


def test_tex_quotes_alternates_across_lines():
    assert tex_quotes(['say "hi', 'there"']) == ["say ``hi", "there''"]


def test_tex_quotes_round_trip():
    lines = ['"To be or not to be," quoth the Bard, "that', 'is the question".']
    converted = tex_quotes(lines)
    assert all('"' not in line for line in converted)
    restored = [line.replace("``", '"').replace("''", '"') for line in converted]
    assert restored == lines


def test_run_272_preserves_line_count():
    data = 'a "b" c\nd "e\nf" g\n'
    assert run_272(data).splitlines() == tex_quotes(data.splitlines())


def test_rotate_sentence_round_trip():
    lines = ["Rene Decartes once said,", '"I think, therefore I am."']
    rotated = rotate_sentence(lines)
    width = max(map(len, lines))
    assert len(rotated) == width
    assert all(len(row) == len(lines) for row in rotated)
    recovered = ["".join(row[k] for row in rotated) for k in range(len(lines))][::-1]
    assert recovered == [line.ljust(width) for line in lines]


def test_rotate_sentence_empty():
    assert rotate_sentence([]) == []


def test_run_490_matches_rotation():
    assert run_490("ab\nc\n").splitlines() == rotate_sentence(["ab", "c"])


def test_conquest_counts_invariants():
    lines = ["Spain Donna Elvira", "England Jane Doe", "Spain Donna Anna", "", "France Marie"]
    result = conquest_counts(lines)
    assert sum(count for _, count in result) == 4
    assert [name for name, _ in result] == sorted({"Spain", "England", "France"})
    assert dict(result)["Spain"] == 2


def test_run_10420_sample():
    data = "3\nSpain Donna Elvira\nEngland Jane Doe\nSpain Donna Anna\n"
    assert run_10420(data) == "England 1\nSpain 2\n"


def test_saxophone_empty_song():
    assert saxophone_presses("") == [0] * 10


def test_saxophone_single_note_uses_fingering():
    assert saxophone_presses("c") == [0, 1, 1, 1, 0, 0, 1, 1, 1, 1]


def test_saxophone_held_fingers_not_recounted():
    assert saxophone_presses("cc") == saxophone_presses("c")
    assert saxophone_presses("cd") == saxophone_presses("c")


def test_saxophone_unknown_note():
    with pytest.raises(ValueError):
        saxophone_presses("cx")


def test_run_10415_handles_blank_song():
    lines = run_10415("3\nc\n\ncc\n").splitlines()
    assert lines == ["0 1 1 1 0 0 1 1 1 1", "0 0 0 0 0 0 0 0 0 0", "0 1 1 1 0 0 1 1 1 1"]