# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .paths import parse_path, join_path
from .accessing import (
    get_size, enumerate_leaf_paths, get_by_path, set_by_path, delete_by_path)
from .merging import merge
from .diffing import diff
from .patching import apply_changes, upgrade
from .change_format import to_change_records
from .log import InvalidPath, TooDeep, ChangeFormatError


__all__ = [
    "__version__",
    "parse_path", "join_path",
    "get_size", "enumerate_leaf_paths", "get_by_path", "set_by_path", "delete_by_path",
    "merge", "diff",
    "apply_changes", "upgrade", "to_change_records",
    "InvalidPath", "TooDeep", "ChangeFormatError",
    ]
