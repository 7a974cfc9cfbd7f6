import pytest

from line_normalizer.core.csv_runtime import (
    build_output_path,
    read_input_text,
    select_body_lines,
    write_output_text,
)
from line_normalizer.core.transform import render_output, transform_lines

HEADER = "Timestamp,Address,ZIP,FullName,FooDuration,BarDuration,TotalDuration,Notes"


def test_output_path_is_plain_prefix_concatenation():
    assert build_output_path("sample.csv", "normalized-") == "normalized-sample.csv"
    assert build_output_path("data/sample.csv", "normalized-") == "normalized-data/sample.csv"


def test_first_line_and_blank_lines_are_dropped():
    text = "header\nline one\n\nline two\n"

    assert select_body_lines(text) == ["line one", "line two"]


def test_first_line_is_kept_when_not_skipping():
    assert select_body_lines("line one\nline two", skip_first_line=False) == ["line one", "line two"]


def test_read_falls_back_to_cp1252(tmp_path):
    path = tmp_path / "latin.csv"
    path.write_bytes("Superman übertan".encode("cp1252"))

    assert read_input_text(str(path), ["utf-8", "cp1252"]) == "Superman übertan"


def test_read_prefers_utf16_when_file_has_bom(tmp_path):
    path = tmp_path / "wide.csv"
    path.write_bytes("header\nSuperman übertan\n".encode("utf-16"))

    assert read_input_text(str(path), ["utf-8", "cp1252", "utf-16"]) == "header\nSuperman übertan\n"


def test_read_raises_when_no_encoding_fits(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_bytes(b"\x80\xff")

    with pytest.raises(ValueError):
        read_input_text(str(path), ["utf-8"])


def test_read_missing_file_raises_os_error(tmp_path):
    with pytest.raises(OSError):
        read_input_text(str(tmp_path / "missing.csv"), ["utf-8"])


def test_render_output_keeps_input_order(plain_line, quoted_notes_line, tmp_path):
    records = transform_lines([quoted_notes_line, plain_line])
    output_path = tmp_path / "out.csv"
    write_output_text(str(output_path), render_output(records))

    lines = output_path.read_text(encoding="utf-8").split("\n")
    assert lines[0] == HEADER
    assert lines[1].startswith("2014-03-12T00:00:00.000-04:00,Somewhere Else,00001,SUPERMAN ÜBERTAN,")
    assert lines[1].endswith(",This is some, notes")
    assert lines[2].startswith("2011-04-01T11:00:00.000-04:00,123 4th St,")
    assert lines[3] == ""
