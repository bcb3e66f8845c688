"""Project-level persistence: the rebuilt flows file, settings, cleanup."""

from __future__ import annotations

import json
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from conf import DEFAULT_FLOWS_FILE
from log import split_error

from .file_format import FileFormat, encode
from .splitter_config import SplitterConfig


@dataclass
class Project:
    """A flow project on disk."""

    path: Path
    flows_file: str = DEFAULT_FLOWS_FILE

    def __post_init__(self):
        self.path = Path(self.path)

    @property
    def flows_path(self) -> Path:
        return self.path / self.flows_file


def write_merged_document(document: list[Any], project_path: str | Path, file_name: str) -> bool:
    """Write ``document`` as pretty JSON to ``project_path/file_name``."""
    try:
        (Path(project_path) / file_name).write_bytes(encode(document, FileFormat.JSON))
    except (OSError, TypeError, ValueError) as e:
        split_error(f"Error while writing file : {e}")
        return False
    return True


def write_settings(project: Project, name: str, settings: SplitterConfig | Mapping[str, Any]) -> bool:
    """Create or overwrite the settings file ``name`` in the project folder."""
    data = settings.to_dict() if isinstance(settings, SplitterConfig) else dict(settings)
    try:
        (project.path / name).write_bytes(encode(data, FileFormat.JSON))
    except (OSError, TypeError, ValueError) as e:
        split_error(f"Could not write settings '{name}': {e}")
        return False
    return True


def load_settings(project: Project, name: str) -> SplitterConfig | None:
    """Read the settings file ``name``. Returns None when missing or invalid."""
    settings_path = project.path / name
    try:
        data = json.loads(settings_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        split_error(f"Could not read settings '{settings_path}': {e}")
        return None
    try:
        return SplitterConfig.model_validate(data)
    except ValidationError as e:
        split_error(f"Invalid settings in '{settings_path}': {e}")
        return None


def clear_split_directory(path: str | Path) -> bool:
    """Recursively remove ``path``.

    Best-effort: a failure is logged and the call still returns True.
    """
    try:
        shutil.rmtree(path)
    except OSError as e:
        split_error(f"Could not remove '{path}': {e}")
    return True
