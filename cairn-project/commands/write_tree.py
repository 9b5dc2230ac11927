# The command: cairn write-tree [path]
# What it does: Stores a whole directory (by default the repository root) in the object database and prints its tree OID
# How it does: Builds a Merkle Tree of the directory, skipping ignored paths, then persists every node children-first
# What data structure it uses: Merkle Tree, Hash Table (the object store), Stack (post-order cascade)

import sys
from utils import builder, ignore, repository
from utils.database import ObjectDatabase
from utils.errors import CairnError


def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a cairn repository", file=sys.stderr)
        sys.exit(1)

    path = getattr(args, 'path', None) or repo_root
    patterns = ignore.get_ignored_patterns(repo_root)
    database = ObjectDatabase(repository.object_storage_root(repo_root))

    try:
        prefix = repository.relative_to_root(repo_root, path)
        tree = builder.build(path, ignore.make_predicate(patterns), prefix)
        database.put_cascade(tree)
    except CairnError as e:
        print(f"Error during write-tree: {e}", file=sys.stderr)
        sys.exit(1)

    print(tree.oid)
