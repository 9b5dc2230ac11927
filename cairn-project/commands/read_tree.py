# The command: cairn read-tree <oid>
# What it does: Replaces the working directory with the snapshot stored under a tree OID
# How it does: Loads the tree and all of its children from the object database, empties the working directory except the excluded paths (`.cairn`, `.git`, `target` and `core.excludes`), then writes every file back
# What data structure it uses: Merkle Tree (resolved recursively from the object store), Set (exclusions)

import sys
from utils import config, repository, restore
from utils.database import ObjectDatabase
from utils.errors import CairnError


def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a cairn repository", file=sys.stderr)
        sys.exit(1)

    database = ObjectDatabase(repository.object_storage_root(repo_root))
    try:
        tree = database.load_tree(args.oid)
        restore.restore(tree, repo_root, config.get_restore_excludes(repo_root))
    except CairnError as e:
        print(f"Error during read-tree: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Restored tree {tree.oid[:7]} ({sum(1 for _ in tree.walk())} paths)")
