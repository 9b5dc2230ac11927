# The command: cairn hash-object [-t blob|tree] [-w] <path>
# What it does: Computes the OID of a file (as a blob) or a directory (as a tree), and optionally stores it
# How it does: Reads the file into a Blob, or snapshots the directory into a Tree with the repository's ignore rules, then prints the OID. With -w the object (and, for a tree, everything under it) is written to the object database
# What data structure it uses: Merkle Tree (for directories), Hash Table (the object store)

import os
import sys
from utils import builder, ignore, repository
from utils.database import ObjectDatabase
from utils.errors import CairnError
from utils.kinds import Kind


def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a cairn repository", file=sys.stderr)
        sys.exit(1)

    obj_type = Kind.parse(getattr(args, 'type', None) or 'blob')
    path = args.path

    try:
        if obj_type is Kind.BLOB:
            if not os.path.isfile(path):
                print(f"fatal: the file path {path} is wrong.", file=sys.stderr)
                sys.exit(1)
            obj = builder.build_blob(path)
        else:
            if not os.path.isdir(path):
                print(f"fatal: the dir path {path} is wrong.", file=sys.stderr)
                sys.exit(1)
            patterns = ignore.get_ignored_patterns(repo_root)
            prefix = repository.relative_to_root(repo_root, path)
            obj = builder.build(path, ignore.make_predicate(patterns), prefix)

        if getattr(args, 'write', False):
            database = ObjectDatabase(repository.object_storage_root(repo_root))
            database.put_cascade(obj)
    except CairnError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(obj.oid)
