import random

import pytest

from algolab.rabin_karp import PRIME, create_hash, main, rabin_karp, roll_hash


def _occurrences(text, pattern):
    found, start = [], text.find(pattern)
    while start != -1:
        found.append(start)
        start = text.find(pattern, start + 1)
    return found


def test_overlapping_word():
    assert rabin_karp("abracadabra", "abra") == [0, 7]


def test_overlapping_runs():
    assert rabin_karp("aaaa", "aa") == _occurrences("aaaa", "aa")


def test_pattern_longer_than_text():
    assert rabin_karp("ab", "abc") == []


def test_empty_pattern_raises():
    with pytest.raises(ValueError):
        rabin_karp("abc", "")


def test_mixed_types_raise():
    with pytest.raises(TypeError):
        rabin_karp("abc", b"a")


@pytest.mark.parametrize("modulus", [PRIME, 3, 1000003])
def test_random_texts_match_find(modulus):
    rng = random.Random(modulus)
    for _ in range(30):
        text = "".join(rng.choice("ab") for _ in range(rng.randint(1, 40)))
        pattern = "".join(rng.choice("ab") for _ in range(rng.randint(1, 4)))
        assert rabin_karp(text, pattern, modulus) == _occurrences(text, pattern)


def test_bytes_and_str_agree():
    text = "the quick brown fox jumps over the lazy dog the end"
    assert rabin_karp(text.encode(), b"the") == rabin_karp(text, "the")


def test_roll_hash_equals_fresh_hash():
    text = "rolling hashes slide along the text"
    length = 12
    value = create_hash(text, length)
    for start in range(len(text) - length):
        value = roll_hash(text, start, start + length, value, length)
        assert value == create_hash(text[start + 1 :], length)


def test_hash_is_within_modulus():
    assert 0 <= create_hash("zzzzzzzzzzzzzzzz", 16, 13) < 13


def test_create_hash_length_outside_text():
    with pytest.raises(ValueError):
        create_hash("abc", 4)


def test_main_writes_report(tmp_path, capsys):
    text_dir = tmp_path / "texts"
    pattern_dir = tmp_path / "patterns"
    text_dir.mkdir()
    pattern_dir.mkdir()
    for t in range(1, 11):
        (text_dir / f"text{t}.txt").write_bytes(b"abcdefghij" * 30)
    for size in range(10, 101, 10):
        (pattern_dir / f"pattern{size}.txt").write_bytes(b"x" * size)
    output = tmp_path / "results.csv"
    code = main(
        ["--text-dir", str(text_dir), "--pattern-dir", str(pattern_dir), "--output", str(output)]
    )
    assert code == 0
    lines = output.read_text().splitlines()
    assert lines[0] == "TextFile,PatternSize,TimeTaken"
    assert len(lines) == 101
    assert lines[1].startswith("text1.txt,10,")
    assert "Results saved in" in capsys.readouterr().out


def test_main_missing_files(tmp_path):
    code = main(
        [
            "--text-dir",
            str(tmp_path / "none"),
            "--pattern-dir",
            str(tmp_path / "none"),
            "--output",
            str(tmp_path / "r.csv"),
        ]
    )
    assert code == 1