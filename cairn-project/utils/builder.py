# What it does: Snapshots a directory on disk as an in-memory Tree object
# How it does: Lists each directory, skips ignored paths, reads every regular file into a Blob and recurses into subdirectories. Entries are sorted by name so the same content gives the same OID on every platform
# What data structure it uses: Merkle Tree (built bottom-up by recursion over the directory tree)

import os

from . import files, tree_entry
from .errors import BuildFailed
from .objects import Blob, Tree


def build(root, is_ignored=None, prefix=''):
    """Returns the Tree for the directory at root.

    is_ignored receives each path relative to root, '/'-separated and
    preceded by prefix (so a subdirectory can be matched with paths relative
    to the repository root), and anything it accepts is neither listed nor
    read. Any I/O error aborts the whole build with BuildFailed.
    """
    if not os.path.isdir(root):
        raise BuildFailed(f"not a directory: {root}")
    if prefix and not prefix.endswith('/'):
        prefix += '/'
    return _build_dir(root, prefix, is_ignored or _ignore_nothing)


def build_blob(path): # Returns the Blob for a single file
    try:
        return Blob(files.read_file(path))
    except OSError as e:
        raise BuildFailed(f"cannot read {path}: {e}") from e


def _ignore_nothing(rel_path):
    return False


def _build_dir(dir_path, rel_dir, is_ignored):
    try:
        listing = sorted(files.list_directory(dir_path))
    except OSError as e:
        raise BuildFailed(f"cannot list {dir_path}: {e}") from e

    entries = []
    for name, is_dir in listing:
        rel_path = f"{rel_dir}{name}"
        if is_ignored(rel_path):
            continue
        if not tree_entry.is_representable(name):
            raise BuildFailed(f"cannot store {rel_path!r}: names with whitespace or invalid UTF-8 are not representable")

        full_path = os.path.join(dir_path, name)
        if is_dir:
            entries.append((name, _build_dir(full_path, f"{rel_path}/", is_ignored)))
        else:
            entries.append((name, build_blob(full_path)))
    return Tree(entries)
