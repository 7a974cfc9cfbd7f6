from typing import Iterable, List

from line_normalizer.core.csv_model import HEADER_LINE, Record, serialize_record
from line_normalizer.core.line_parser import parse_line
from line_normalizer.core.normalize import normalize_row


# ---------------------------------------------------------------------------
# Transform a single line
# ---------------------------------------------------------------------------
def transform_line(line: str) -> Record:
    """Parse one body line and normalize the resulting record."""
    record = parse_line(line)
    normalize_row(record)
    return record


def transform_lines(lines: Iterable[str]) -> List[Record]:
    return [transform_line(line) for line in lines]


# ---------------------------------------------------------------------------
# Render output text
# ---------------------------------------------------------------------------
def render_output(records: Iterable[Record]) -> str:
    """Header line followed by one line per record, each ending in a newline."""
    output_lines = [HEADER_LINE]
    output_lines.extend(serialize_record(record) for record in records)
    return "\n".join(output_lines) + "\n"
