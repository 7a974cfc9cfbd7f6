"""
Line parser:
- Splits one raw CSV body line into a Record
- Resolves which column a quoted (embedded-comma) value belongs to

Only one quoted column per line is supported. The column is chosen by the
length of the text in front of the first quotation mark: a timestamp alone
is taken to be at most 21 characters, anything longer must already contain the
address and the rest of the leading columns.
"""

from typing import List, Optional

from line_normalizer.core.csv_model import FIELD_NAMES, Record, build_record


QUOTE = '"'
SEPARATOR = ","
MAX_TIMESTAMP_LENGTH = 21

ADDRESS = "address"
NOTES = "notes"


# ---------------------------------------------------------------------------
# Decide which column holds the quoted value
# ---------------------------------------------------------------------------
def locate_quoted_field(leading_text: str) -> str:
    """
    Return the name of the column that the quoted value belongs to.

    leading_text is everything before the first quotation mark, including
    the separator that precedes the quote.
    """
    if len(leading_text[:-1]) <= MAX_TIMESTAMP_LENGTH:
        return ADDRESS
    return NOTES


# ---------------------------------------------------------------------------
# Parse a single line
# ---------------------------------------------------------------------------
def parse_line(line: str) -> Record:
    """
    Convert one raw body line (no trailing newline) into a Record.

    Values are raw text. Positions the line does not supply are None;
    short or malformed lines never raise.
    """
    parts = line.split(QUOTE)

    # No quotation marks: plain positional split
    if len(parts) == 1:
        return build_record(line.split(SEPARATOR))

    leading_text = parts[0]
    quoted_value = parts[1]

    if locate_quoted_field(leading_text) == ADDRESS:
        # timestamp,"address, with, commas",zipcode,...,notes
        trailing_text = parts[2] if len(parts) > 2 else ""
        trailing_values = trailing_text.split(SEPARATOR)

        # trailing_values[0] is the empty text between the quote and its separator
        values: List[Optional[str]] = [leading_text[:-1], quoted_value]
        values.extend(trailing_values[1:])
        return build_record(values)

    # timestamp,address,...,totalDuration,"notes, with, commas"
    leading_count = len(FIELD_NAMES) - 1
    values = list(leading_text.split(SEPARATOR)[:leading_count])
    values.extend([None] * (leading_count - len(values)))
    values.append(quoted_value)
    return build_record(values)
