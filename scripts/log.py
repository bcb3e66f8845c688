"""
Flow Splitter - Logging Module
Timestamped log lines to stderr and to the split.log file.
"""
import sys
from datetime import datetime
from pathlib import Path

from conf import LOG_FILE

LOG = True  # Set to False to disable logging
LOG_TO_STDERR = True  # stdout stays free for command output
first_line = True


def split_log(message: str) -> None:
    """Append ``message`` to split.log if LOG is enabled."""
    global first_line
    if not LOG:
        return
    if first_line:
        first_line = False
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        split_log(f"--- New Flow Splitter Session in {Path.cwd()} ---")
    stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    line = f"[{stamp}] {message}\n"
    if LOG_TO_STDERR:
        sys.stderr.write(line)
    with open(LOG_FILE, "a", encoding="utf-8") as f:
        f.write(line)


def split_error(message: str) -> None:
    """Log a failure; error lines always carry the ``ERROR:`` prefix."""
    split_log(f"ERROR: {message}")
