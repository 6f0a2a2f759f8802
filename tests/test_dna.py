import pytest

from stacklab.dna import Mismatch, OddLengthError, find_mismatch, is_pair, main


@pytest.mark.parametrize("a, b", [("A", "T"), ("T", "A"), ("G", "C"), ("C", "G")])
def test_valid_pairs(a, b):
    assert is_pair(a, b)
    assert is_pair(b, a)


@pytest.mark.parametrize("a, b", [("A", "A"), ("A", "G"), ("C", "T"), ("a", "t")])
def test_invalid_pairs(a, b):
    assert not is_pair(a, b)


def test_example_sequence_matches():
    assert find_mismatch("ATGCAT") is None


def test_empty_sequence_matches():
    assert find_mismatch("") is None


def test_odd_length_raises():
    with pytest.raises(OddLengthError):
        find_mismatch("ATG")


def test_first_mismatch_reported():
    assert find_mismatch("AAAA") == Mismatch("A", "A", 3)


def test_mismatch_deeper_in_sequence():
    result = find_mismatch("GATTAC")
    assert result is not None
    assert result.position > len("GATTAC") // 2
    assert not is_pair(result.stacked, result.current)
    assert "GATTAC"[result.position - 1] == result.current


def test_palindromic_complement_matches():
    first = "GATTACA"
    complement = {"A": "T", "T": "A", "G": "C", "C": "G"}
    second = "".join(complement[base] for base in reversed(first))
    assert find_mismatch(first + second) is None


def test_main_success(capsys):
    assert main(["ATGCAT"]) == 0
    assert "All base pairs match" in capsys.readouterr().out


def test_main_mismatch(capsys):
    assert main(["AAAA"]) == 0
    assert "A - A" in capsys.readouterr().out


def test_main_odd(capsys):
    assert main(["ATG"]) == 1
    assert "odd length" in capsys.readouterr().out