import pytest

from tap.errors import PatternError
from tap.paths import expand_paths
from tap.paths import validate_pattern


@pytest.mark.unit
def test_expand_matching_pattern(tmp_path):
    file1 = tmp_path / "test1.txt"
    file2 = tmp_path / "test2.txt"
    file2.touch()
    file1.touch()
    (tmp_path / "other.md").touch()

    expanded = expand_paths([str(tmp_path / "test*.txt")])

    assert expanded == [file1, file2]


@pytest.mark.unit
def test_expand_without_match_is_literal(tmp_path):
    pattern = str(tmp_path / "new*.txt")

    assert expand_paths([pattern]) == [tmp_path / "new*.txt"]


@pytest.mark.unit
def test_expand_plain_missing_path(tmp_path):
    assert expand_paths([str(tmp_path / "a" / "b.txt")]) == [tmp_path / "a" / "b.txt"]


@pytest.mark.unit
def test_expand_keeps_pattern_order_and_duplicates(tmp_path):
    (tmp_path / "a.txt").touch()
    (tmp_path / "b.txt").touch()

    expanded = expand_paths([str(tmp_path / "b.txt"), str(tmp_path / "*.txt"), str(tmp_path / "b.txt")])

    assert expanded[0] == tmp_path / "b.txt"
    assert expanded[1:] == [tmp_path / "a.txt", tmp_path / "b.txt", tmp_path / "b.txt"]


@pytest.mark.unit
def test_expand_matches_hidden_files(tmp_path):
    (tmp_path / ".hidden").touch()

    assert expand_paths([str(tmp_path / "*")]) == [tmp_path / ".hidden"]


@pytest.mark.unit
def test_expand_recursive_wildcard(tmp_path):
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    (nested / "deep.log").touch()
    (tmp_path / "top.log").touch()

    expanded = expand_paths([str(tmp_path / "**" / "*.log")])

    assert expanded == [nested / "deep.log", tmp_path / "top.log"]


@pytest.mark.unit
def test_expand_skips_malformed_pattern(tmp_path, capsys):
    (tmp_path / "ok.txt").touch()

    expanded = expand_paths([str(tmp_path / "bad["), str(tmp_path / "ok.txt")])

    assert expanded == [tmp_path / "ok.txt"]
    assert "Invalid glob pattern" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.parametrize("pattern", ["a[bc", "x/[]", "***", "a**/b", "a/**b"])
def test_validate_rejects_malformed(pattern):
    with pytest.raises(PatternError):
        validate_pattern(pattern)


@pytest.mark.unit
@pytest.mark.parametrize("pattern", ["a[bc]", "[]]", "[!a]x", "**", "a/**/b", "*.txt", "plain"])
def test_validate_accepts_well_formed(pattern):
    validate_pattern(pattern)
