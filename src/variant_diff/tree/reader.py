"""FileTree reader: turn a repository folder into a path -> text mapping.

Keys are paths relative to the root, always with forward slashes, compared
case-sensitively.  Version-control and dependency-manager folders are not
entered, and symbolic links are skipped rather than followed.  Binary files
(any NUL byte) are skipped, as are files larger than ``max_bytes`` when a
limit is given; the engine only ever sees text.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from variant_diff.logging_config import get_logger

__all__ = ["IGNORED_DIRS", "FileTree", "merge_trees", "read_file_tree"]

logger = get_logger(__name__)

FileTree = dict[str, str]

IGNORED_DIRS: frozenset[str] = frozenset({".git", ".hg", ".svn", "node_modules"})


def read_file_tree(
    root: str | Path,
    ignored_dirs: Iterable[str] = IGNORED_DIRS,
    max_bytes: int | None = None,
) -> FileTree:
    """Read every text file under ``root``.

    Entries are visited in sorted order, so the resulting dict iterates
    deterministically.

    Args:
        root:         Directory to walk.
        ignored_dirs: Directory names never entered, at any depth.
        max_bytes:    Skip files larger than this many bytes.  None for no
                      limit.

    Returns:
        Mapping of relative POSIX path to file content (UTF-8, undecodable
        bytes replaced).

    Raises:
        FileNotFoundError:  ``root`` does not exist.
        NotADirectoryError: ``root`` is not a directory.
    """
    root_path = Path(root)
    if not root_path.exists():
        msg = f"No such directory: {root_path}"
        raise FileNotFoundError(msg)
    if not root_path.is_dir():
        msg = f"Not a directory: {root_path}"
        raise NotADirectoryError(msg)

    ignored = frozenset(ignored_dirs)
    files: FileTree = {}
    _walk(root_path, root_path, ignored, max_bytes, files)
    logger.debug("read file tree", root=str(root_path), files=len(files))
    return files


def merge_trees(*trees: Mapping[str, str]) -> FileTree:
    """Merge trees left to right; later trees win on duplicate paths.

    Used to treat a variant's test, solution and template repositories as one
    tree when suggesting mappings.
    """
    merged: FileTree = {}
    for tree in trees:
        merged.update(tree)
    return merged


def _walk(
    directory: Path,
    root: Path,
    ignored: frozenset[str],
    max_bytes: int | None,
    files: FileTree,
) -> None:
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.name in ignored or entry.is_symlink():
            continue
        if entry.is_dir():
            _walk(entry, root, ignored, max_bytes, files)
        elif entry.is_file():
            rel_path = entry.relative_to(root).as_posix()
            if max_bytes is not None and entry.stat().st_size > max_bytes:
                logger.debug("skipping large file", path=rel_path, limit=max_bytes)
                continue
            raw = entry.read_bytes()
            if b"\0" in raw:
                logger.debug("skipping binary file", path=rel_path)
                continue
            files[rel_path] = raw.decode("utf-8", errors="replace")
