# What it does: Produces the content identifier (OID) for any byte sequence
# How it does: SHA-1 over the exact bytes given, returned either raw or as lowercase hex
# What data structure it uses: None, pure functions over bytes

import hashlib

from .errors import HashFailure

DIGEST_SIZE = 20


def digest(data): # Returns the raw 20-byte SHA-1 digest of data
    try:
        return hashlib.sha1(data).digest()
    except TypeError as e:
        raise HashFailure(f"cannot hash {type(data).__name__}") from e


def digest_hex(data): # Returns the 40-character hexadecimal form of digest(data)
    return digest(data).hex()

