"""Write a FlowSet to disk as one file per record."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from log import split_error

from .categories import CATEGORIES
from .file_format import FileFormat, UnsupportedFormatError, encode
from .flow_set import FlowSet


class FlowFileMaker:
    """Splits a FlowSet into ``<src_path>/<category>/<name>.<ext>`` files."""

    def __init__(self, src_path: str | Path, flow_set: FlowSet, file_format: FileFormat | str) -> None:
        self.src_path = Path(src_path)
        self.flow_set = flow_set
        self.file_format = file_format

    def create_split_files(self) -> bool:
        """Write every record of the flow set.

        Returns False without touching the disk when the flow set is missing a
        category or the format is unsupported. A record that fails to write is
        logged and skipped; the batch still succeeds.
        """
        if not self.flow_set.is_viable:
            split_error("Given flowSet is not a viable crafted set")
            return False
        try:
            fmt = FileFormat.parse(self.file_format)
        except UnsupportedFormatError as e:
            split_error(str(e))
            return False

        for category in CATEGORIES:
            for record in self.flow_set[category]:
                self.make_src_file(Path(category.value) / record.normalized_name, record.content, fmt)
        return True

    def make_src_file(self, name: str | Path, content: Any, file_format: FileFormat | str) -> Path | None:
        """Write ``content`` to ``src_path/<name>.<ext>``. Returns the path, or None on failure."""
        try:
            data = encode(content, file_format)
        except UnsupportedFormatError as e:
            split_error(str(e))
            return None
        except (TypeError, ValueError, yaml.YAMLError) as e:
            split_error(f"Could not encode '{name}': {e}")
            return None

        target = self.src_path / f"{name}.{FileFormat.parse(file_format).extension}"
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as e:
            split_error(f"Could not create src files : {e}")
            return None
        return target
