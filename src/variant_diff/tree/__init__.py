"""Tree subpackage: file trees read from disk and the mappings between them.

Re-exports:
- read_file_tree / merge_trees / IGNORED_DIRS: directory walking
- FileMapping / apply_mappings: accepted renames applied to a variant tree
"""

from variant_diff.tree.mappings import FileMapping, apply_mappings
from variant_diff.tree.reader import IGNORED_DIRS, FileTree, merge_trees, read_file_tree

__all__ = [
    "IGNORED_DIRS",
    "FileMapping",
    "FileTree",
    "apply_mappings",
    "merge_trees",
    "read_file_tree",
]
