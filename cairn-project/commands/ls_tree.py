# The command: cairn ls-tree <oid>
# What it does: Lists the entries of a stored tree, one `<kind> <oid> <name>` line each
# How it does: Reads the tree's payload and decodes each entry line, without loading the children
# What data structure it uses: List (decoded entries)

import sys
from utils import repository, tree_entry
from utils.database import ObjectDatabase
from utils.errors import CairnError, UnexpectedKind
from utils.kinds import Kind


def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a cairn repository", file=sys.stderr)
        sys.exit(1)

    database = ObjectDatabase(repository.object_storage_root(repo_root))
    try:
        obj_type, payload = database.get(args.oid)
        if obj_type is not Kind.TREE:
            raise UnexpectedKind(args.oid, Kind.TREE, obj_type)
        entries = tree_entry.decode_all(payload.decode('utf-8'))
    except (CairnError, UnicodeDecodeError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    for entry in entries:
        print(tree_entry.encode(*entry))
