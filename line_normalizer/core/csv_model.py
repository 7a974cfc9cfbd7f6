from typing import Dict, List, Optional, Sequence


# ---------------------------------------------------------------------------
# Record layout
# ---------------------------------------------------------------------------
FIELD_NAMES: List[str] = [
    "timestamp",
    "address",
    "zipcode",
    "fullName",
    "fooDuration",
    "barDuration",
    "totalDuration",
    "notes",
]

HEADER_LINE: str = "Timestamp,Address,ZIP,FullName,FooDuration,BarDuration,TotalDuration,Notes"

Record = Dict[str, Optional[str]]


# ---------------------------------------------------------------------------
# Build a record from positional values
# ---------------------------------------------------------------------------
def build_record(values: Sequence[Optional[str]]) -> Record:
    """
    Assign values to the eight fields in column order.

    Positions the input does not reach stay None; extra values are ignored.
    """
    record: Record = {}
    for position, field in enumerate(FIELD_NAMES):
        record[field] = values[position] if position < len(values) else None
    return record


# ---------------------------------------------------------------------------
# Serialize a record
# ---------------------------------------------------------------------------
def serialize_record(record: Record) -> str:
    """Join the fields with commas in column order. No quoting is applied."""
    return ",".join(
        "" if record.get(field) is None else record[field]
        for field in FIELD_NAMES
    )
