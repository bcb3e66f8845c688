#!/usr/bin/env python3
"""
Flow Splitter - Main Entry Point
Splits a flows file into per-record source files, or rebuilds it from them.
"""
import argparse
import json
import sys
from pathlib import Path

from conf import DEFAULT_CONFIG_FILE, DEFAULT_FLOWS_FILE
from flow_store import (
    FlowFileMaker,
    FlowSet,
    Project,
    SplitterConfig,
    clear_split_directory,
    load_settings,
    rebuild_flows,
    write_merged_document,
    write_settings,
)
from log import split_error, split_log

# =============================================================================
# COMMANDS
# =============================================================================

def _project_settings(project: Project, config_name: str) -> SplitterConfig | None:
    """Load the project's settings, or defaults if there are none yet.

    Returns None when the settings file exists but cannot be used.
    """
    if not (project.path / config_name).exists():
        return SplitterConfig()
    return load_settings(project, config_name)


def _split_folder(project: Project, settings: SplitterConfig) -> Path | None:
    """Resolve the split folder, refusing anything that is not strictly inside the project."""
    root = project.path.resolve()
    src_path = (project.path / settings.destination_folder).resolve()
    if src_path == root or not src_path.is_relative_to(root):
        split_error(f"Split folder '{src_path}' is not inside the project '{root}'")
        return None
    return src_path


def split_project(project: Project, config_name: str = DEFAULT_CONFIG_FILE) -> bool:
    """Split ``project.flows_path`` into the configured source folder."""
    try:
        flows = json.loads(project.flows_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        split_error(f"Could not read flows file '{project.flows_path}': {e}")
        return False
    if not isinstance(flows, list) or not all(isinstance(node, dict) for node in flows):
        split_error(f"Flows file '{project.flows_path}' does not hold an array of nodes")
        return False

    settings = _project_settings(project, config_name)
    if settings is None:
        return False
    src_path = _split_folder(project, settings)
    if src_path is None:
        return False
    flow_set = FlowSet.from_flows(flows)

    if src_path.exists():
        clear_split_directory(src_path)
    maker = FlowFileMaker(src_path, flow_set, settings.file_format)
    if not maker.create_split_files():
        return False

    settings.tabs_order = flow_set.tabs_order
    return write_settings(project, config_name, settings)


def rebuild_project(project: Project, config_name: str = DEFAULT_CONFIG_FILE) -> bool:
    """Rebuild ``project.flows_path`` from the configured source folder."""
    settings = _project_settings(project, config_name)
    if settings is None:
        return False
    flows = rebuild_flows(project.path, settings)
    if flows is None:
        return False
    return write_merged_document(flows, project.path, project.flows_file)


COMMANDS = {
    "split": split_project,
    "rebuild": rebuild_project,
}

# =============================================================================
# MAIN
# =============================================================================

def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Split a flows file into per-record source files and rebuild it",
    )
    parser.add_argument(
        "command",
        choices=sorted(COMMANDS),
        help="split: flows file -> source folder, rebuild: source folder -> flows file",
    )
    parser.add_argument(
        "--project",
        "-p",
        type=Path,
        default=Path.cwd(),
        help="Project folder holding the flows file (default: current directory)",
    )
    parser.add_argument(
        "--flows-file",
        default=DEFAULT_FLOWS_FILE,
        help=f"Flows file name inside the project (default: {DEFAULT_FLOWS_FILE})",
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help=f"Settings file name inside the project (default: {DEFAULT_CONFIG_FILE})",
    )
    args = parser.parse_args(argv)

    project = Project(path=args.project, flows_file=args.flows_file)
    split_log(f"Running '{args.command}' on {project.path}")
    ok = COMMANDS[args.command](project, args.config)
    split_log(f"'{args.command}' {'completed' if ok else 'failed'}")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
