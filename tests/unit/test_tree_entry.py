# Unit tests for utils/tree_entry.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'cairn-project'))

from utils import tree_entry
from utils.errors import MalformedEntry, UnknownKind
from utils.kinds import Kind

OID = 'fa958e0dd2203e9ad56853a3f51e5945dad317a4'


class TestEncode:

    def test_format(self):
        assert tree_entry.encode('blob', OID, 'cats.txt') == f'blob {OID} cats.txt'

    def test_accepts_kind_member(self):
        assert tree_entry.encode(Kind.TREE, OID, 'other') == f'tree {OID} other'

    def test_rejects_name_with_space(self):
        with pytest.raises(MalformedEntry):
            tree_entry.encode('blob', OID, 'my file.txt')

    def test_rejects_empty_name(self):
        with pytest.raises(MalformedEntry):
            tree_entry.encode('blob', OID, '')

    def test_rejects_name_not_valid_utf8(self):
        # undecodable bytes from os.listdir come back as lone surrogates
        with pytest.raises(MalformedEntry):
            tree_entry.encode('blob', OID, 'caf\udce9.txt')

    def test_is_representable(self):
        assert tree_entry.is_representable('caf\u00e9.txt')
        assert not tree_entry.is_representable('caf\udce9.txt')
        assert not tree_entry.is_representable('a b')

    def test_rejects_unknown_kind(self):
        with pytest.raises(UnknownKind):
            tree_entry.encode('commit', OID, 'x')


class TestDecode:

    def test_round_trip(self):
        entry = tree_entry.decode(tree_entry.encode('tree', OID, 'src'))
        assert entry == (Kind.TREE, OID, 'src')
        assert entry.kind is Kind.TREE
        assert entry.name == 'src'

    def test_two_fields_is_malformed(self):
        with pytest.raises(MalformedEntry):
            tree_entry.decode('blob abc')

    def test_four_fields_is_malformed(self):
        with pytest.raises(MalformedEntry):
            tree_entry.decode(f'blob {OID} my file.txt')

    def test_unknown_kind(self):
        with pytest.raises(UnknownKind):
            tree_entry.decode('weird abc123 file.txt')

    def test_flattened_name_keeps_separator(self):
        entry = tree_entry.decode(f'blob {OID} other/dogs.txt')
        assert entry.name == 'other/dogs.txt'


class TestPayload:

    def test_empty_payload_is_empty_tree(self):
        assert tree_entry.decode_all('') == []

    def test_lines_joined_without_trailing_newline(self):
        text = tree_entry.encode_all([('blob', OID, 'a'), ('tree', OID, 'b')])
        assert text == f'blob {OID} a\ntree {OID} b'
        assert [e.name for e in tree_entry.decode_all(text)] == ['a', 'b']
