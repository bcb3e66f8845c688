"""Tests for SplitterConfig – camelCase settings model."""

import pytest
from pydantic import ValidationError

from flow_store import FileFormat, SplitterConfig


class TestDefaults:
    def test_defaults(self):
        cfg = SplitterConfig()
        assert cfg.destination_folder == "src"
        assert cfg.file_format == FileFormat.YAML
        assert cfg.tabs_order == []


class TestAliases:
    def test_from_camel_case(self):
        cfg = SplitterConfig.model_validate(
            {"destinationFolder": "out", "fileFormat": "json", "tabsOrder": ["a"]}
        )
        assert cfg.destination_folder == "out"
        assert cfg.file_format == "json"
        assert cfg.tabs_order == ["a"]

    def test_by_field_name(self):
        cfg = SplitterConfig(destination_folder="x", file_format="json")
        assert cfg.to_dict()["destinationFolder"] == "x"

    def test_unknown_keys_survive(self):
        cfg = SplitterConfig.model_validate({"monitoring": False})
        assert cfg.to_dict()["monitoring"] is False


class TestValidation:
    def test_rejects_unknown_format(self):
        with pytest.raises(ValidationError):
            SplitterConfig(fileFormat="xml")


class TestDestinationFolder:
    @pytest.mark.parametrize("folder", ["src", "nodes/flows", "./src", "a/../b", "src\\win"])
    def test_accepts_subfolders(self, folder):
        assert SplitterConfig(destinationFolder=folder).destination_folder == folder

    @pytest.mark.parametrize("folder", [
        "/tmp/outside",
        "C:\\flows",
        "\\\\server\\share",
        "",
        ".",
        "./",
        "src/..",
        "..",
        "../sibling",
        "a/../../b",
    ])
    def test_rejects_paths_outside_project(self, folder):
        with pytest.raises(ValidationError):
            SplitterConfig(destinationFolder=folder)
