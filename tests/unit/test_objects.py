# Unit tests for utils/objects.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'cairn-project'))

from utils import hashing, objects
from utils.errors import HashFailure, MalformedEntry
from utils.kinds import Kind
from utils.objects import Blob, Tree


class TestBlob:

    def test_canonical_encoding(self):
        assert Blob(b'hello').canonical_encoding() == b'blob\0hello'

    def test_oid_is_hash_of_encoding(self):
        assert Blob(b'hello').oid == hashing.digest_hex(b'blob\0hello')

    def test_deterministic(self):
        assert Blob(b'hello').oid == Blob(b'hello').oid

    def test_content_sensitive(self):
        assert Blob(b'hello').oid != Blob(b'world').oid

    def test_binary_content_kept_exactly(self):
        data = bytes(range(256))
        assert Blob(data).content == data

    def test_is_read_only(self):
        blob = Blob(b'x')
        with pytest.raises(AttributeError):
            blob.oid = 'something else'

    def test_rejects_text_content(self):
        with pytest.raises(HashFailure):
            Blob('text is not bytes')

    def test_kind(self):
        assert objects.kind(Blob(b'')) is Kind.BLOB

    def test_module_level_accessors(self):
        blob = Blob(b'hello')
        assert objects.canonical_encoding(blob) == blob.canonical_encoding()
        assert objects.oid(blob) == blob.oid


class TestTree:

    def test_canonical_encoding(self):
        a = Blob(b'hello')
        sub = Tree([('b.txt', Blob(b'world'))])
        tree = Tree([('a.txt', a), ('d', sub)])

        expected = f'tree\0blob {a.oid} a.txt\ntree {sub.oid} d'.encode()
        assert tree.canonical_encoding() == expected
        assert tree.oid == hashing.digest_hex(expected)

    def test_empty_tree(self):
        assert Tree().canonical_encoding() == b'tree\0'
        assert len(Tree()) == 0

    def test_insertion_order_is_kept(self):
        a, b = Blob(b'a'), Blob(b'b')
        assert Tree([('a', a), ('b', b)]).oid != Tree([('b', b), ('a', a)]).oid
        assert Tree([('b', b), ('a', a)]).names() == ['b', 'a']

    def test_child_change_changes_parent_oid(self):
        before = Tree([('d', Tree([('f', Blob(b'1'))]))])
        after = Tree([('d', Tree([('f', Blob(b'2'))]))])
        assert before.oid != after.oid

    def test_rejects_non_object_child(self):
        with pytest.raises(TypeError):
            Tree([('x', b'raw bytes')])

    def test_rejects_unrepresentable_name(self):
        with pytest.raises(MalformedEntry):
            Tree([('has space', Blob(b''))])

    def test_walk(self):
        tree = Tree([('a.txt', Blob(b'hello')), ('d', Tree([('b.txt', Blob(b'world'))]))])
        paths = [path for path, _ in tree.walk()]
        assert paths == ['a.txt', 'd', 'd/b.txt']

    def test_get(self):
        blob = Blob(b'hello')
        tree = Tree([('a.txt', blob)])
        assert tree.get('a.txt') is blob
        assert tree.get('missing') is None

    def test_equality_by_oid(self):
        assert Tree([('a', Blob(b'1'))]) == Tree([('a', Blob(b'1'))])
        assert Tree() != Blob(b'')

    def test_repr_lists_children(self):
        tree = Tree([('a.txt', Blob(b'hello'))])
        assert 'a.txt' in repr(tree)


class TestDecodeObject:

    def test_blob(self):
        blob = objects.decode_object(Kind.BLOB, b'hello', resolve=None)
        assert blob == Blob(b'hello')

    def test_tree_resolves_children(self):
        child = Blob(b'hello')
        tree = Tree([('a.txt', child)])
        store = {child.oid: child}

        decoded = objects.decode_object('tree', tree.payload(), store.__getitem__)

        assert decoded.canonical_encoding() == tree.canonical_encoding()
        assert decoded.get('a.txt') == child

    def test_empty_tree(self):
        assert objects.decode_object('tree', b'', resolve=None) == Tree()

    def test_kind_mismatch(self):
        child = Blob(b'hello')
        payload = f'tree {child.oid} a.txt'.encode()
        with pytest.raises(MalformedEntry):
            objects.decode_object('tree', payload, {child.oid: child}.__getitem__)
