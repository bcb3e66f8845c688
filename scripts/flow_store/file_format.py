"""Encoding of records to and from JSON or YAML bytes."""

from __future__ import annotations

import json
import os
from enum import StrEnum
from typing import Any

import yaml


class UnsupportedFormatError(ValueError):
    """Raised for a file format other than json or yaml."""


class FileFormat(StrEnum):
    JSON = "json"
    YAML = "yaml"

    @classmethod
    def parse(cls, value: FileFormat | str) -> FileFormat:
        """Return the FileFormat for ``value`` or raise UnsupportedFormatError."""
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedFormatError(f"Unsupported file format: {value!r}") from None

    @property
    def extension(self) -> str:
        """Suffix used when writing a file, without the dot."""
        return self.value

    @property
    def read_suffixes(self) -> tuple[str, ...]:
        """Suffixes accepted when scanning a directory."""
        if self is FileFormat.YAML:
            return (".yaml", ".yml")
        return (".json",)

    def matches(self, file_name: str) -> bool:
        return file_name.lower().endswith(self.read_suffixes)


class _FlowLoader(yaml.SafeLoader):
    """SafeLoader that reads timestamps as plain strings, as JSON would."""


_FlowLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class _DoubleQuoteDumper(yaml.SafeDumper):
    """SafeDumper that never picks single quotes for a scalar."""

    def choose_scalar_style(self):
        style = super().choose_scalar_style()
        if style == "'":
            return '"'
        return style


def _to_platform_eol(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\n", os.linesep)


def encode(value: Any, file_format: FileFormat | str) -> bytes:
    """Serialize ``value`` in the given format as UTF-8 bytes."""
    fmt = FileFormat.parse(file_format)
    if fmt is FileFormat.JSON:
        text = _to_platform_eol(json.dumps(value, indent=2, ensure_ascii=False))
    else:
        text = yaml.dump(
            value,
            Dumper=_DoubleQuoteDumper,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
    return text.encode("utf-8")


def decode(data: bytes | str, file_format: FileFormat | str) -> Any:
    """Parse ``data`` back into a value.

    Malformed input raises the underlying parser error
    (``json.JSONDecodeError``, ``yaml.YAMLError`` or ``UnicodeDecodeError``).
    """
    fmt = FileFormat.parse(file_format)
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    if fmt is FileFormat.JSON:
        return json.loads(data)
    return yaml.load(data, Loader=_FlowLoader)
