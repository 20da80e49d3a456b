import pytest

from cogame.csvreader import CsvReader, parse_csv


def test_simple_rows():
    assert parse_csv("a,b,c\n1,2,3\n") == [["a", "b", "c"], ["1", "2", "3"]]


def test_no_trailing_newline_and_empty_text():
    assert parse_csv("x,y") == [["x", "y"]]
    assert parse_csv("") == []


def test_empty_line_gives_one_empty_cell():
    assert parse_csv("a\n\nb") == [["a"], [""], ["b"]]


def test_crlf_lines():
    assert parse_csv("a,b\r\nc\r\n") == [["a", "b"], ["c"]]


def test_quotes_are_removed_before_splitting():
    assert parse_csv('"a,b",c') == [["a", "b", "c"]]


def test_doubled_quote_becomes_literal():
    assert parse_csv('he said ""hi""') == [['he said "hi"']]


def test_quoted_cell_spans_lines():
    assert parse_csv('x,"a\nb"\nz') == [["x", "a\nb"], ["z"]]


def test_bom_is_skipped_in_text_and_file(tmp_path):
    assert parse_csv("\ufeffk,v") == [["k", "v"]]
    path = tmp_path / "bom.csv"
    path.write_bytes(b"\xef\xbb\xbfGravity,0.5\n")
    reader = CsvReader(path)
    assert reader.get_string(0, 0) == "Gravity"
    assert reader.get_float(0, 1) == 0.5


def test_missing_file_has_no_lines(tmp_path):
    reader = CsvReader(tmp_path / "absent.csv")
    assert len(reader) == 0
    assert reader.lines == 0


def test_columns_and_out_of_range():
    reader = CsvReader.from_text("a,b\nc\n")
    assert reader.columns(0) == 2
    assert reader.columns(1) == 1
    assert reader.get_string(1, 5) == ""
    with pytest.raises(IndexError):
        reader.get_string(2, 0)
    with pytest.raises(IndexError):
        reader.columns(-1)


def test_get_int():
    reader = CsvReader.from_text("42,, 7abc,abc\n")
    assert reader.get_int(0, 0) == 42
    assert reader.get_int(0, 1) == 0
    assert reader.get_int(0, 2) == 7
    assert reader.get_int(0, 9) == 0
    with pytest.raises(ValueError):
        reader.get_int(0, 3)


def test_get_float():
    reader = CsvReader.from_text("1.5,,x\n")
    assert reader.get_float(0, 0) == 1.5
    assert reader.get_float(0, 1) == 0.0
    with pytest.raises(ValueError):
        reader.get_float(0, 2)