# What it does: The raw file primitives the rest of the core reads and writes through
# How it does: Byte-exact reads and writes; writes create any missing parent directories first
# What data structure it uses: List of (name, is_directory) pairs for directory listings

import os
import tempfile

TEMP_PREFIX = '.tmp-' # Half-written files, never a valid OID


def read_file(path): # Returns the full contents of path as bytes
    with open(path, 'rb') as f:
        return f.read()


def write_file(path, data): # Writes data to path, creating parent directories as needed
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, 'wb') as f:
        f.write(data)


def write_file_atomic(path, data): # Like write_file, but readers only ever see the old file or the complete new one
    parent = os.path.dirname(path) or '.'
    os.makedirs(parent, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=parent, prefix=TEMP_PREFIX)
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise


def list_directory(path): # Returns [(name, is_directory), ...] for regular files and directories directly under path
    entries = []
    with os.scandir(path) as it:
        for entry in it:
            if entry.is_symlink():
                continue
            if entry.is_dir():
                entries.append((entry.name, True))
            elif entry.is_file():
                entries.append((entry.name, False))
    return entries
