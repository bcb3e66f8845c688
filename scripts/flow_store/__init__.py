"""Split a flows document into per-record files and merge it back."""

from .categories import CATEGORIES, Category
from .category_writer import FlowFileMaker
from .file_format import FileFormat, UnsupportedFormatError, decode, encode
from .flow_set import FlowRecord, FlowSet, normalize_name
from .merger import merge_all, merge_category, rebuild_flows
from .project_files import (
    Project,
    clear_split_directory,
    load_settings,
    write_merged_document,
    write_settings,
)
from .reorder import reorder
from .splitter_config import SplitterConfig
