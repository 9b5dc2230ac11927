# The command: cairn init
# What it does: Initializes a new, empty repository by creating the hidden `.cairn` directory and its object store
# How it does: It creates `.cairn/objects`, the flat directory that will hold one file per stored object
# What data structure it uses: Tree (the file system directory structure is a tree). It also lays the foundation for a Hash Table (the object database)

import os
import sys
from utils import repository


def run(args):
    try:
        path = getattr(args, 'path', None) or os.getcwd()
        repo_path, created = repository.init_repository(path)

        if not created:
            print(f"Reinitialized existing Cairn repository in {repo_path}/")
            return

        print(f"Initialized empty Cairn repository in {repo_path}/")

    except OSError as e:
        print(f"Error initializing repository: {e}", file=sys.stderr)
        sys.exit(1)
