#!/usr/bin/env python3
import sys
import traceback
from typing import Any, Dict, List

from line_normalizer.core.csv_model import Record
from line_normalizer.core.csv_runtime import (
    build_output_path,
    read_input_text,
    select_body_lines,
    write_output_text,
)
from line_normalizer.core.normalize import INVALID_DATE
from line_normalizer.core.runtime import load_settings, log_event, settings_path
from line_normalizer.core.transform import render_output, transform_lines
import line_normalizer.core.completion as completion


EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_UNEXPECTED = 99


def count_invalid_fields(records: List[Record]) -> int:
    return sum(
        1
        for record in records
        for value in record.values()
        if value == INVALID_DATE
    )


# -------------------------------------------------------------------------
# Main pipeline
# -------------------------------------------------------------------------
def main() -> None:
    if len(sys.argv) != 2:
        print("Usage: normalize-csv <csv_path>")
        sys.exit(EXIT_IO_ERROR)

    csv_file_path = sys.argv[1]

    context: Dict[str, Any] = {
        "csv_file_path": csv_file_path,
        "logfile_path": None,
        "log_event": log_event,
    }

    try:
        settings = load_settings(settings_path())
        logfile_path = settings["logfile"]
        context["logfile_path"] = logfile_path

        log_event(logfile_path, f"Reading {csv_file_path}")

        # -----------------------------------------------------------------
        # Load input
        # -----------------------------------------------------------------
        file_text = read_input_text(csv_file_path, settings["encodings"])
        body_lines = select_body_lines(file_text, settings["skip_first_line"])
        log_event(logfile_path, f"Loaded {len(body_lines)} body lines")

        # -----------------------------------------------------------------
        # Parse + normalize
        # -----------------------------------------------------------------
        records = transform_lines(body_lines)

        invalid_count = count_invalid_fields(records)
        if invalid_count:
            log_event(logfile_path, f"{invalid_count} fields could not be parsed as dates")

        # -----------------------------------------------------------------
        # Write output
        # -----------------------------------------------------------------
        output_path = build_output_path(csv_file_path, settings["output_prefix"])
        write_output_text(output_path, render_output(records))
        log_event(logfile_path, f"Wrote {len(records)} records to {output_path}")

    except (OSError, ValueError) as e:
        completion.finalize(context, exit_code=EXIT_IO_ERROR, message=str(e))
        return

    except Exception as e:
        completion.finalize(
            context,
            exit_code=EXIT_UNEXPECTED,
            message=f"UNEXPECTED ERROR: {e}",
            details=f"Traceback:\n{traceback.format_exc()}",
        )
        return

    completion.finalize(
        context,
        exit_code=EXIT_OK,
        message=f"Created normalized csv: {output_path}",
    )


if __name__ == "__main__":
    main()
