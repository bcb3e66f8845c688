"""Rebuild a flows document from a split source folder."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from log import split_error, split_log

from .categories import CATEGORIES
from .file_format import FileFormat, UnsupportedFormatError, decode
from .reorder import reorder
from .splitter_config import SplitterConfig


def merge_category(category_dir: str | Path, file_format: FileFormat | str) -> list[Any] | None:
    """Decode every matching file in ``category_dir`` and concatenate the results.

    A file holding a list contributes its items; any other value is appended
    as one record. Files that cannot be read or parsed are logged and skipped.
    Returns None when the format is unsupported or the folder can't be listed.
    """
    try:
        fmt = FileFormat.parse(file_format)
    except UnsupportedFormatError:
        split_error(f"Unexpected file format in the config file : {file_format}")
        return None

    folder = Path(category_dir)
    try:
        entries = sorted(folder.iterdir())
    except OSError as e:
        split_error(f"Unexpected error happened while parsing a source folder : {e}")
        return None

    merged: list[Any] = []
    for fp in entries:
        if not fp.is_file() or not fmt.matches(fp.name):
            continue
        try:
            content = decode(fp.read_bytes(), fmt)
        except (OSError, ValueError, yaml.YAMLError) as e:
            split_error(f"Could not add the content of '{fp.name}' : {e}")
            continue
        if content is None:
            split_log(f"Skipping empty source file '{fp.name}'")
        elif isinstance(content, list):
            merged.extend(content)
        else:
            merged.append(content)
    return merged


def merge_all(
    project_root: str | Path,
    destination_folder: str,
    config: SplitterConfig,
) -> list[Any] | None:
    """Concatenate tabs, subflows and config-nodes, in that order.

    Every category folder must exist; if one is missing nothing is read and
    None is returned.
    """
    src = Path(project_root) / destination_folder
    if not src.is_dir() or not all((src / c.value).is_dir() for c in CATEGORIES):
        split_error(f"Missing source files in : '{destination_folder}'")
        return None

    flows: list[Any] = []
    for category in CATEGORIES:
        nodes = merge_category(src / category.value, config.file_format)
        if nodes is None:
            return None
        flows.extend(nodes)
    return flows


def rebuild_flows(project_root: str | Path, config: SplitterConfig) -> list[Any] | None:
    """Merge the configured source folder and restore the ``tabsOrder`` ordering."""
    flows = merge_all(project_root, config.destination_folder, config)
    if flows is None:
        return None
    return reorder(flows, config.tabs_order)
