# What it does: Implements the `.cairnignore` functionality and the fixed set of paths that are never stored or cleared
# What data structure it uses: Set (to store the ignore patterns for efficient, near O(1) average time complexity lookups)

import os
from fnmatch import fnmatch

from .repository import REPO_DIR

IGNORE_FILE = '.cairnignore'
DEFAULT_PATTERNS = frozenset({REPO_DIR, '.git', 'target'}) # Always ignore these


def get_ignored_patterns(repo_root):
    """
    Reads the .cairnignore file and returns a set of glob patterns.
    """
    ignore_file = os.path.join(repo_root, IGNORE_FILE)
    patterns = set(DEFAULT_PATTERNS)

    if os.path.exists(ignore_file):
        with open(ignore_file, 'r') as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#'):
                    patterns.add(line.rstrip('/'))
    return patterns


def is_ignored(path, ignore_patterns): # Returns True if the path, or any one of its segments, matches an ignore pattern
    path = path.replace(os.sep, '/')
    for pattern in ignore_patterns:
        if fnmatch(path, pattern) or any(fnmatch(part, pattern) for part in path.split('/')):
            return True
    return False


def make_predicate(ignore_patterns): # Binds a pattern set into the one-argument predicate the builder and restorer take
    patterns = frozenset(ignore_patterns)

    def predicate(path):
        return is_ignored(path, patterns)

    return predicate
