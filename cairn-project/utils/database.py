# What it does: Stores and retrieves objects by their OID, the "object database"
# How it does: One file per object, named by its OID, holding exactly the object's canonical encoding (`<kind>\0<payload>`). Writes are skipped when the file already holds the same bytes, and go through a temporary file so a crash never leaves a partial object behind. Persisting a tree walks its children post-order so every referenced object is stored before the tree that names it
# What data structure it uses: Hash Table (the object directory is a dictionary keyed by SHA-1 hex), Stack (explicit post-order traversal for cascade writes)

import os

from . import files, objects
from .errors import ObjectNotFound, UnexpectedKind, UnrecognizedFormat
from .kinds import SEPARATOR, Kind


class ObjectDatabase:

    def __init__(self, root):
        self.root = root

    def path_for(self, oid): # Location of the object file for oid
        if not oid or os.sep in oid or '/' in oid or oid in ('.', '..'):
            raise ObjectNotFound(oid)
        return os.path.join(self.root, oid)

    def contains(self, oid):
        try:
            return os.path.isfile(self.path_for(oid))
        except ObjectNotFound:
            return False

    def iter_oids(self): # Every OID currently stored
        if not os.path.isdir(self.root):
            return
        for name in sorted(os.listdir(self.root)):
            if name.startswith(files.TEMP_PREFIX):
                continue
            if os.path.isfile(os.path.join(self.root, name)):
                yield name

    def put(self, oid, data):
        """Stores data under oid; returns True if a file was written.

        An existing file holding the same bytes is left alone. One holding
        anything else (a write cut short by a crash) is replaced, so re-running
        a cascade repairs it. The new file is moved into place in one step.
        """
        path = self.path_for(oid)
        if os.path.isfile(path) and files.read_file(path) == data:
            return False
        files.write_file_atomic(path, data)
        return True

    def get(self, oid): # Returns (Kind, payload) for oid without interpreting the payload
        try:
            data = files.read_file(self.path_for(oid))
        except FileNotFoundError:
            raise ObjectNotFound(oid) from None

        sep_index = data.find(SEPARATOR)
        if sep_index == -1:
            raise UnrecognizedFormat(f"object {oid} has no kind separator")
        kind = Kind.parse(data[:sep_index])
        return kind, data[sep_index + 1:]

    def put_object(self, obj): # Stores one object, not its children
        return self.put(obj.oid, obj.canonical_encoding())

    def put_cascade(self, obj):
        """Stores obj and every object it references.

        Children are written before their parents, so a tree that made it to
        disk always has its whole subgraph on disk too. Returns the OIDs that
        were newly written, in write order.
        """
        written = []
        stack = [(obj, False)]
        while stack:
            current, expanded = stack.pop()
            if current.kind is Kind.TREE and not expanded:
                stack.append((current, True))
                for _, child in reversed(current.entries):
                    stack.append((child, False))
                continue
            if self.put_object(current):
                written.append(current.oid)
        return written

    def load(self, oid): # Returns the fully resolved Blob or Tree stored under oid
        kind, payload = self.get(oid)
        return objects.decode_object(kind, payload, self.load)

    def load_tree(self, oid):
        kind, payload = self.get(oid)
        if kind is not Kind.TREE:
            raise UnexpectedKind(oid, Kind.TREE, kind)
        return objects.decode_object(kind, payload, self.load)
