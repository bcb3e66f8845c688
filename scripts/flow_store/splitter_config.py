"""SplitterConfig — per-project settings persisted next to the flows file."""

from __future__ import annotations

from pathlib import PurePosixPath, PureWindowsPath

from pydantic import BaseModel, ConfigDict, Field, field_validator

from conf import DEFAULT_DESTINATION_FOLDER

from .file_format import FileFormat


class SplitterConfig(BaseModel):
    """Settings read by the merge step and written back after a split.

    Stored as camelCase JSON (``destinationFolder``, ``fileFormat``,
    ``tabsOrder``). Keys this model does not know about are kept so a
    round trip never drops them.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
        use_enum_values=True,
    )

    destination_folder: str = Field(default=DEFAULT_DESTINATION_FOLDER, alias="destinationFolder")
    file_format: FileFormat = Field(default=FileFormat.YAML, alias="fileFormat")
    tabs_order: list[str] = Field(default_factory=list, alias="tabsOrder")

    @field_validator("destination_folder")
    @classmethod
    def _inside_project(cls, value: str) -> str:
        """The split folder is wiped on every split, so it must be a subfolder of the project."""
        if PurePosixPath(value).is_absolute() or PureWindowsPath(value).anchor:
            raise ValueError(f"destinationFolder must be relative to the project: {value!r}")
        depth = 0
        for part in PurePosixPath(value.replace("\\", "/")).parts:
            if part == "..":
                depth -= 1
                if depth < 0:
                    raise ValueError(f"destinationFolder leaves the project: {value!r}")
            elif part != ".":
                depth += 1
        if depth == 0:
            raise ValueError(f"destinationFolder must name a subfolder of the project: {value!r}")
        return value

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
