from __future__ import annotations

from .forestconfig import ForestConfig
from .forestindex import ForestIndex
from .forestmodel import ROOT_PARENT
from .forestmodel import File
from .forestquery import FileForest
from .forestquery import NoRootsError
from .forestquery import k_largest_categories
from .forestquery import largest_file_size
from .forestquery import leaf_files

__all__ = [
    "ROOT_PARENT",
    "File",
    "FileForest",
    "ForestConfig",
    "ForestIndex",
    "NoRootsError",
    "k_largest_categories",
    "largest_file_size",
    "leaf_files",
]
