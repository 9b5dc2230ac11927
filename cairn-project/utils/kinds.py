# What it does: Names the two kinds of stored object and the literal written for each
# How it does: A str-valued Enum, so a member can be written straight into an object header or a tree entry
# What data structure it uses: Enumeration

from enum import Enum

from .errors import UnknownKind

SEPARATOR = b'\0' # Between the kind literal and the payload in a canonical encoding


class Kind(str, Enum):
    BLOB = 'blob'
    TREE = 'tree'

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, literal): # Maps 'blob' / 'tree' (str or bytes) to a Kind, anything else is UnknownKind
        if isinstance(literal, bytes):
            try:
                literal = literal.decode('ascii')
            except UnicodeDecodeError:
                raise UnknownKind(literal) from None
        try:
            return cls(literal)
        except ValueError:
            raise UnknownKind(literal) from None

    def header(self): # The bytes that prefix every canonical encoding of this kind
        return self.value.encode('ascii') + SEPARATOR
