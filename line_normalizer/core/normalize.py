"""
Field normalization:
- One pure transform per recognized field, collected in FIELD_RULES
- normalize_row applies the table to a Record in place

Transforms never raise on bad input. Text that cannot be read as a
timestamp or duration is replaced by INVALID_DATE.
"""

import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Callable, Dict, Optional
from zoneinfo import ZoneInfo

from line_normalizer.core.csv_model import Record


INVALID_DATE = "Invalid date"

EASTERN = ZoneInfo("America/New_York")
TIMESTAMP_FORMAT = "%m/%d/%y %I:%M:%S %p"

ZIPCODE_LENGTH = 5

# h:mm:ss.SSS read as a clock time
CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{1,2}):(\d{1,2})(?:\.(\d+))?$")

# [-][d.]h:mm[:ss[.SSS]] read as elapsed time
ELAPSED_PATTERN = re.compile(
    r"^([-+])?(?:(\d+)[. ])?(\d+):(\d+)(?::(\d+)(?:\.(\d*))?)?$"
)

FieldRule = Callable[[str, Record], str]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _milliseconds(fraction: Optional[str]) -> int:
    """Read up to three fraction digits as milliseconds ("1" -> 100)."""
    if not fraction:
        return 0
    return int(fraction[:3].ljust(3, "0"))


def parse_clock_time(text: str, on_day: Optional[date] = None) -> Optional[datetime]:
    """
    Read h:mm:ss.SSS as a time of day on on_day (default: today).

    24:00:00.000 is accepted and means midnight at the end of the day.
    """
    match = CLOCK_PATTERN.match(text.strip())
    if not match:
        return None

    day = on_day or date.today()
    hours, minutes, seconds, fraction = match.groups()
    if int(hours) == 24 and int(minutes) == int(seconds) == _milliseconds(fraction) == 0:
        return datetime.combine(day, time(0)) + timedelta(days=1)

    try:
        clock = time(
            int(hours),
            int(minutes),
            int(seconds),
            _milliseconds(fraction) * 1000,
        )
    except ValueError:
        return None

    return datetime.combine(day, clock)


def parse_elapsed(text: str) -> Optional[timedelta]:
    """Read h:mm:ss.SSS (optionally prefixed with days) as a duration."""
    match = ELAPSED_PATTERN.match(text.strip())
    if not match:
        return None

    sign, days, hours, minutes, seconds, fraction = match.groups()
    try:
        elapsed = timedelta(
            days=int(days or 0),
            hours=int(hours),
            minutes=int(minutes),
            seconds=int(seconds or 0),
            milliseconds=_milliseconds(fraction),
        )
    except (OverflowError, ValueError):
        return None

    return -elapsed if sign == "-" else elapsed


def format_clock_time(when: datetime) -> str:
    """Format as hh:mm:ss.SSS with a 12-hour clock hour."""
    return f"{when.strftime('%I:%M:%S')}.{when.microsecond // 1000:03d}"


# ---------------------------------------------------------------------------
# Field rules
# ---------------------------------------------------------------------------
def normalize_timestamp(value: str, record: Record) -> str:
    """4/1/11 11:00:00 AM -> 2011-04-01T11:00:00.000-04:00 (Eastern wall clock)."""
    try:
        parsed = datetime.strptime(value.strip(), TIMESTAMP_FORMAT)
    except ValueError:
        return INVALID_DATE

    # Round trip through UTC moves wall times in the spring-forward gap
    # onto a real Eastern local time (2:30 AM -> 3:30 AM EDT).
    eastern = parsed.replace(tzinfo=EASTERN).astimezone(timezone.utc).astimezone(EASTERN)
    return eastern.isoformat(timespec="milliseconds")


def normalize_zipcode(value: str, record: Record) -> str:
    return value.rjust(ZIPCODE_LENGTH, "0")


def normalize_full_name(value: str, record: Record) -> str:
    return value.upper()


def normalize_total_duration(value: str, record: Record) -> str:
    """
    Replace the total with fooDuration + barDuration.

    fooDuration is read as a clock time on today's date and barDuration as
    an elapsed time; the sum is printed back as a clock time.
    """
    foo_text = record.get("fooDuration")
    bar_text = record.get("barDuration")
    if foo_text is None or bar_text is None:
        return value

    foo = parse_clock_time(foo_text)
    bar = parse_elapsed(bar_text)
    if foo is None or bar is None:
        return INVALID_DATE

    try:
        return format_clock_time(foo + bar)
    except OverflowError:
        return INVALID_DATE


FIELD_RULES: Dict[str, FieldRule] = {
    "timestamp": normalize_timestamp,
    "zipcode": normalize_zipcode,
    "fullName": normalize_full_name,
    "totalDuration": normalize_total_duration,
}


# ---------------------------------------------------------------------------
# Normalize a single row
# ---------------------------------------------------------------------------
def normalize_row(record: Record) -> None:
    """
    Apply FIELD_RULES to the record in place.

    Fields without a rule, and fields the line did not supply (None),
    are left untouched.
    """
    for field, rule in FIELD_RULES.items():
        value = record.get(field)
        if value is None:
            continue
        record[field] = rule(value, record)
