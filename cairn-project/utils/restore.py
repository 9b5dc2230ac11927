# What it does: Rebuilds a working directory from a stored Tree, replacing whatever was there
# How it does: First empties the directory bottom-up, leaving excluded paths (the repository metadata and friends) and any directory still holding them. Then writes every blob as a file and every subtree as a directory, recursing with the child's path as the new prefix
# What data structure it uses: Tree Traversal (os.walk bottom-up to clear, recursion over the Tree to materialise), Set (exclusion patterns)

import os

from . import files, ignore
from .errors import RestoreFailed
from .kinds import Kind


def clear_directory(root, excludes):
    """Deletes everything under root except paths matching excludes.

    A path is excluded when it, or any of its segments, matches one of the
    glob patterns. Directories are only removed once they are empty.
    """
    excludes = frozenset(excludes)
    try:
        for dirpath, dirnames, filenames in os.walk(root, topdown=False):
            rel_dir = os.path.relpath(dirpath, root)
            rel_dir = '' if rel_dir == '.' else rel_dir
            if rel_dir and ignore.is_ignored(rel_dir, excludes):
                continue
            for filename in filenames:
                rel_path = os.path.join(rel_dir, filename)
                if ignore.is_ignored(rel_path, excludes):
                    continue
                os.remove(os.path.join(root, rel_path))
            for dirname in dirnames:
                rel_path = os.path.join(rel_dir, dirname)
                full_path = os.path.join(root, rel_path)
                if ignore.is_ignored(rel_path, excludes):
                    continue
                if os.path.islink(full_path):
                    os.remove(full_path)
                elif not os.listdir(full_path):
                    os.rmdir(full_path)
    except OSError as e:
        raise RestoreFailed(f"cannot clear {root}: {e}") from e


def restore(tree, root, excludes=ignore.DEFAULT_PATTERNS): # Makes root mirror tree; not transactional, a failure leaves it half-written
    if tree.kind is not Kind.TREE:
        raise RestoreFailed(f"can only restore a tree, got a {tree.kind}")
    os.makedirs(root, exist_ok=True)
    clear_directory(root, excludes)
    _materialize(tree, root, '')


def _materialize(tree, root, prefix):
    for name, child in tree.entries:
        rel_path = _entry_path(prefix, name)
        full_path = os.path.join(root, *rel_path.split('/'))
        try:
            if child.kind is Kind.BLOB:
                files.write_file(full_path, child.content)
            else:
                os.makedirs(full_path, exist_ok=True)
        except OSError as e:
            raise RestoreFailed(f"cannot write {rel_path}: {e}") from e
        if child.kind is Kind.TREE:
            _materialize(child, root, f"{rel_path}/")


def _entry_path(prefix, name): # Root-relative '/'-separated path for an entry of the tree at prefix
    # Names that already carry a '/' are flattened root-relative paths
    rel_path = name if '/' in name else f"{prefix}{name}"
    parts = rel_path.split('/')
    if rel_path.startswith('/') or any(part in ('', '.', '..') for part in parts):
        raise RestoreFailed(f"refusing to write outside the working directory: {name!r}")
    return rel_path
