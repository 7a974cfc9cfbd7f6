"""
CSV runtime helpers:
- Input loading (encoding fallback)
- Body line selection
- Output path construction
- Output writing

This module contains all file-related runtime infrastructure.
Nothing more, nothing less.
"""

import codecs
from typing import List, Sequence


UTF16_BOMS = (codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)


# ---------------------------------------------------------------------------
# Prepare output path
# ---------------------------------------------------------------------------
def build_output_path(csv_file_path: str, output_prefix: str) -> str:
    """
    Name of the normalized output file.

    Plain prefix concatenation: "data/in.csv" becomes "normalized-data/in.csv".
    """
    return output_prefix + csv_file_path


# ---------------------------------------------------------------------------
# Load input
# ---------------------------------------------------------------------------
def read_input_text(csv_file_path: str, encodings: Sequence[str]) -> str:
    """
    Read the whole input file as text.

    Encoding strategy:
    - A UTF-16 byte order mark puts utf-16 first (cp1252 would accept it)
    - Otherwise try each encoding in order (utf-8, cp1252, utf-16 by default)
    - The first one that decodes wins

    Raises:
        OSError: if the file cannot be opened.
        ValueError: if no encoding decodes the file.
    """
    with open(csv_file_path, "rb") as f:
        head = f.read(2)

    encodings = list(encodings)
    if head in UTF16_BOMS:
        encodings = ["utf-16"] + [enc for enc in encodings if enc != "utf-16"]

    for enc in encodings:
        try:
            with open(csv_file_path, "r", encoding=enc) as f:
                return f.read()
        except UnicodeDecodeError:
            continue

    raise ValueError(
        f"Unable to decode {csv_file_path} with {', '.join(encodings)}."
    )


# ---------------------------------------------------------------------------
# Select body lines
# ---------------------------------------------------------------------------
def select_body_lines(file_text: str, skip_first_line: bool = True) -> List[str]:
    """
    Split file text into lines and keep the ones that carry data.

    - The first line is dropped as a header when skip_first_line is set
    - Empty lines are dropped
    """
    lines = file_text.split("\n")
    if skip_first_line:
        lines = lines[1:]
    return [line for line in lines if line]


# ---------------------------------------------------------------------------
# Write output
# ---------------------------------------------------------------------------
def write_output_text(output_path: str, output_text: str) -> None:
    """Write the finished CSV text in one go."""
    with open(output_path, "w", encoding="utf-8", newline="") as f:
        f.write(output_text)
