"""Flow Splitter - Central path configuration."""

from pathlib import Path

USER_HOME = Path.home()
FLOW_HOME = USER_HOME / ".flow"
SPLITTER_HOME = FLOW_HOME / "flow-splitter"

SCRIPT_DIR = Path(__file__).parent.resolve()

LOG_FILE = SPLITTER_HOME / "split.log"

# Project-level defaults
DEFAULT_FLOWS_FILE = "flows.json"
DEFAULT_CONFIG_FILE = ".config.flow-splitter.json"
DEFAULT_DESTINATION_FOLDER = "src"
