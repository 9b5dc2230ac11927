# What it does: Locates the repository and the object storage directory inside it
# How it does: `find_repo_root` walks up the directory tree to locate the `.cairn` directory
# What data structure it uses: Uses recursion (specifically, linear recursion) to find the repo root

import os

REPO_DIR = '.cairn'
OBJECTS_DIR = 'objects'


def find_repo_root(path='.'): # Recursively searches for the .cairn directory to find the repository root
    path = os.path.abspath(path)
    repo_dir = os.path.join(path, REPO_DIR)
    if os.path.isdir(repo_dir):
        return path
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_repo_root(parent_path)


def repo_dir(repo_root):
    return os.path.join(repo_root, REPO_DIR)


def object_storage_root(repo_root): # Directory holding one file per stored object
    return os.path.join(repo_root, REPO_DIR, OBJECTS_DIR)


def init_repository(path='.'): # Creates .cairn/objects under path; returns (repo_dir, created)
    target = repo_dir(os.path.abspath(path))
    existed = os.path.isdir(target)
    os.makedirs(os.path.join(target, OBJECTS_DIR), exist_ok=True)
    return target, not existed


def relative_to_root(repo_root, path): # '/'-separated path of path inside repo_root, '' for the root itself or a path outside it
    rel_path = os.path.relpath(os.path.abspath(path), repo_root)
    if rel_path == '.' or rel_path == os.pardir or rel_path.startswith(os.pardir + os.sep):
        return ''
    return rel_path.replace(os.sep, '/')
