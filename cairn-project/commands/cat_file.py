# The command: cairn cat-file [-t blob|tree] <oid>
# What it does: The "opposite" of hash-object: prints the payload of a stored object
# How it does: Reads `.cairn/objects/<oid>`, splits off the kind literal and prints the rest. If an expected type is given and the object is of another kind, it fails
# What data structure it uses: Hash Table (object store lookup)

import sys
from utils import repository
from utils.database import ObjectDatabase
from utils.errors import CairnError
from utils.kinds import Kind


def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a cairn repository", file=sys.stderr)
        sys.exit(1)

    database = ObjectDatabase(repository.object_storage_root(repo_root))
    try:
        obj_type, payload = database.get(args.oid)
        expected = getattr(args, 'type', None)
        if expected and Kind.parse(expected) is not obj_type:
            print(f"fatal: Expected object type {expected}, got {obj_type}", file=sys.stderr)
            sys.exit(1)
    except CairnError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    sys.stdout.buffer.write(payload)
    sys.stdout.flush()
