# What it does: Defines the typed failures raised by the object store core
# How it does: Every error derives from `CairnError` so the command layer can catch the whole family in one place. Lower-level OS errors are chained onto them with `raise ... from`
# What data structure it uses: Class hierarchy (a small inheritance tree of exception types)


class CairnError(Exception):
    pass


class HashFailure(CairnError):
    pass


class ObjectFormatError(CairnError): # Stored bytes or entry lines that cannot be parsed
    pass


class MalformedEntry(ObjectFormatError):
    pass


class UnrecognizedFormat(ObjectFormatError):
    pass


class UnknownKind(ObjectFormatError):
    def __init__(self, literal):
        super().__init__(f"unknown object kind: {literal!r}")
        self.literal = literal


class UnexpectedKind(CairnError):
    def __init__(self, oid, expected, actual):
        super().__init__(f"object {oid} is a {actual}, not a {expected}")
        self.oid = oid
        self.expected = expected
        self.actual = actual


class ObjectNotFound(CairnError, FileNotFoundError): # Still a FileNotFoundError for callers that only know the builtin
    def __init__(self, oid):
        super().__init__(f"Object not found: {oid}")
        self.oid = oid


class BuildFailed(CairnError):
    pass


class RestoreFailed(CairnError):
    pass
