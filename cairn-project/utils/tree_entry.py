# What it does: Encodes and decodes the single line that a tree stores for each of its children
# How it does: A line is `<kind> <oid> <name>` joined by single spaces. Names are written verbatim, so a name with whitespace in it cannot be read back and is refused
# What data structure it uses: Named tuple (one parsed line), String splitting

from collections import namedtuple

from .errors import MalformedEntry
from .kinds import Kind

TreeEntry = namedtuple('TreeEntry', ['kind', 'oid', 'name'])

LINE_SEPARATOR = '\n'


def encode(kind, oid, name): # Renders one entry line, without the trailing newline
    kind = Kind.parse(kind)
    if not is_representable(name):
        raise MalformedEntry(f"entry name {name!r} is empty, contains whitespace or is not valid UTF-8")
    return f"{kind} {oid} {name}"


def is_representable(name): # True when name survives an encode/decode round trip
    if not name or any(c.isspace() for c in name):
        return False
    try:
        name.encode('utf-8')
    except UnicodeEncodeError:
        return False
    return True


def decode(line): # Parses one entry line back into a TreeEntry
    fields = line.split()
    if len(fields) != 3:
        raise MalformedEntry(f"expected 3 fields in tree entry, got {len(fields)}: {line!r}")
    kind, oid, name = fields
    return TreeEntry(Kind.parse(kind), oid, name)


def encode_all(entries): # [(kind, oid, name), ...] -> newline-joined payload text
    return LINE_SEPARATOR.join(encode(*entry) for entry in entries)


def decode_all(text): # Payload text -> list of TreeEntry, an empty payload is an empty tree
    if not text:
        return []
    return [decode(line) for line in text.split(LINE_SEPARATOR)]
