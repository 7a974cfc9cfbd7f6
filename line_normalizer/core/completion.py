"""
Completion module:
Handles ALL end-of-processing operations:
- Final log entry
- Console message (stdout on success, stderr on failure)
- Process exit

This module is the single exit path for the entire processing flow.
"""

import sys
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Finalization
# ---------------------------------------------------------------------------
def finalize(
    context: Dict[str, Any],
    exit_code: int,
    message: str,
    details: Optional[str] = None,
) -> None:
    """
    Log the outcome, report it on the console, then exit.

    details (e.g. a traceback) only goes to the log, never to the console.
    """
    log_event = context["log_event"]
    logfile_path = context.get("logfile_path")

    log_message = message if details is None else f"{message}\n\n{details}"
    log_event(logfile_path, log_message)

    stream = sys.stdout if exit_code == 0 else sys.stderr
    print(message, file=stream)

    sys.exit(exit_code)
