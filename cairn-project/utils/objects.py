# What it does: Defines the two object kinds (Blob and Tree), their canonical byte encoding and their content identifier (OID)
# How it does: Each object is assembled completely in its constructor, then encoded and hashed once; the OID is cached and the object is read-only from then on. A tree's encoding lists its children's OIDs, so a tree's OID covers everything below it (a Merkle tree)
# What data structure it uses: Merkle Tree (Tree objects own Blob/Tree children), Tagged union (every consumer dispatches on Kind)

from . import hashing, tree_entry
from .errors import HashFailure, MalformedEntry
from .kinds import Kind


class Blob:
    """A file's raw bytes as an addressable object."""

    __slots__ = ('_content', '_oid')
    kind = Kind.BLOB

    def __init__(self, content):
        try:
            self._content = bytes(content)
        except TypeError as e:
            raise HashFailure(f"blob content must be bytes, not {type(content).__name__}") from e
        self._oid = hashing.digest_hex(self.canonical_encoding())

    @property
    def content(self):
        return self._content

    @property
    def oid(self):
        return self._oid

    def payload(self):
        return self._content

    def canonical_encoding(self):
        return self.kind.header() + self._content

    def __eq__(self, other):
        return isinstance(other, Blob) and other._oid == self._oid

    def __hash__(self):
        return hash(self._oid)

    def __repr__(self):
        preview = self._content[:32]
        more = '...' if len(self._content) > 32 else ''
        return f"Blob({self._oid[:7]}, {preview!r}{more})"


class Tree:
    """A directory snapshot: ordered (name, child) pairs, children being Blob or Tree.

    Names are the child's path segment relative to this tree. The entry order
    given to the constructor is the order that gets encoded and hashed.
    """

    __slots__ = ('_entries', '_oid')
    kind = Kind.TREE

    def __init__(self, entries=()):
        self._entries = tuple((name, child) for name, child in entries)
        for name, child in self._entries:
            if not isinstance(child, (Blob, Tree)):
                raise TypeError(f"tree entry {name!r} is not a Blob or Tree: {child!r}")
        self._oid = hashing.digest_hex(self.canonical_encoding())

    @property
    def entries(self):
        return self._entries

    @property
    def oid(self):
        return self._oid

    def payload(self): # Newline-joined entry lines, as bytes
        lines = [(child.kind, child.oid, name) for name, child in self._entries]
        return tree_entry.encode_all(lines).encode('utf-8')

    def canonical_encoding(self):
        return self.kind.header() + self.payload()

    def names(self):
        return [name for name, _ in self._entries]

    def get(self, name, default=None):
        for entry_name, child in self._entries:
            if entry_name == name:
                return child
        return default

    def walk(self, prefix=''): # Yields (path, object) for every object below this tree, depth-first
        for name, child in self._entries:
            path = f"{prefix}{name}"
            yield path, child
            if child.kind is Kind.TREE:
                yield from child.walk(f"{path}/")

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __eq__(self, other):
        return isinstance(other, Tree) and other._oid == self._oid

    def __hash__(self):
        return hash(self._oid)

    def __repr__(self):
        children = []
        for name, child in self._entries:
            if child.kind is Kind.BLOB:
                children.append(f"file {name}: {child.content[:32]!r}")
            else:
                children.append(f"dir {name}: {child.oid}")
        return f"Tree({self._oid[:7]}, [{', '.join(children)}])"


def kind(obj):
    return obj.kind


def canonical_encoding(obj):
    return obj.canonical_encoding()


def oid(obj):
    return obj.oid


def decode_object(kind, payload, resolve): # Rebuilds an object from its kind and payload; resolve(oid) loads each tree child
    kind = Kind.parse(kind)
    if kind is Kind.BLOB:
        return Blob(payload)

    try:
        text = payload.decode('utf-8')
    except UnicodeDecodeError as e:
        raise MalformedEntry("tree payload is not valid UTF-8") from e

    children = []
    for entry in tree_entry.decode_all(text):
        child = resolve(entry.oid)
        if child.kind is not entry.kind:
            raise MalformedEntry(
                f"entry {entry.name!r} says {entry.kind} but {entry.oid} is a {child.kind}")
        children.append((entry.name, child))
    return Tree(children)
