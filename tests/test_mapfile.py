import io

import pytest

from solong.mapfile import (
    MapPathError,
    is_blank_line,
    is_valid_map_name,
    load_map,
    read_lines,
    read_map_lines,
)


@pytest.mark.parametrize("size", [1, 2, 3, 42, 1000])
def test_read_lines_independent_of_buffer_size(size):
    text = "111\n1P1\n\n111"
    assert list(read_lines(io.StringIO(text), size)) == text.split("\n")


def test_read_lines_final_newline_gives_no_empty_line():
    text = "abc\ndef\n"
    assert list(read_lines(io.StringIO(text))) == ["abc", "def"]


def test_read_lines_keeps_inner_empty_line_before_final_newline():
    assert list(read_lines(io.StringIO("a\n\n"), 4)) == ["a", ""]


def test_read_lines_empty_stream():
    assert list(read_lines(io.StringIO(""))) == []


def test_read_lines_binary_stream():
    assert list(read_lines(io.BytesIO(b"11\n1P\n"), 3)) == [b"11", b"1P"]


@pytest.mark.parametrize("size", [0, -5])
def test_read_lines_rejects_non_positive_buffer(size):
    with pytest.raises(ValueError):
        list(read_lines(io.StringIO("x"), size))


@pytest.mark.parametrize("line", ["", "   ", "\t\r\v\f", " \n"])
def test_blank_lines(line):
    assert is_blank_line(line) is True


@pytest.mark.parametrize("line", ["1", " 1 ", "\t0"])
def test_non_blank_lines(line):
    assert is_blank_line(line) is False


def test_read_map_lines_skips_leading_blanks_and_trims_later_rows():
    lines = ["", "  ", "111", "1P1  ", "111\t"]
    assert read_map_lines(lines) == ["111", "1P1", "111"]


def test_read_map_lines_keeps_first_row_untrimmed():
    lines = ["111 ", "1P1"]
    assert read_map_lines(lines)[0] == "111 "


def test_read_map_lines_stops_at_blank_line():
    lines = ["111", "1P1", "   ", "111", "1E1"]
    assert read_map_lines(lines) == ["111", "1P1"]


def test_read_map_lines_all_blank():
    assert read_map_lines(["", " ", "\t"]) == []


def test_valid_map_name(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("1\n")
    assert is_valid_map_name(path) is True
    assert is_valid_map_name(str(path)) is True


def test_map_name_without_dot(tmp_path):
    path = tmp_path / "levelber"
    path.write_text("1\n")
    assert is_valid_map_name(path) is False


def test_map_name_missing_file(tmp_path):
    assert is_valid_map_name(tmp_path / "absent.ber") is False


def test_map_name_rejected_pattern(tmp_path):
    path = tmp_path / "x.aerx"
    path.write_text("1\n")
    assert is_valid_map_name(path) is False


def test_map_name_other_extension_accepted(tmp_path):
    path = tmp_path / "x.aer"
    path.write_text("1\n")
    assert is_valid_map_name(path) is True


def test_load_map_reads_rows(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("\n\n11111\n1PCE1  \n11111\n\ntrailing\n")
    assert load_map(path) == ["11111", "1PCE1", "11111"]


def test_load_map_keeps_carriage_return_on_first_row(tmp_path):
    path = tmp_path / "level.ber"
    path.write_bytes(b"111\r\n1P1\r\n")
    rows = load_map(path)
    assert rows == ["111\r", "1P1"]


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapPathError):
        load_map(tmp_path / "missing.ber")


def test_load_map_no_extension(tmp_path):
    path = tmp_path / "level"
    path.write_text("111\n")
    with pytest.raises(MapPathError):
        load_map(path)