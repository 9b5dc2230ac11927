# Shared pytest fixtures for Cairn tests

import pytest
import os
import sys
import shutil
import tempfile

# Add cairn-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'cairn-project'))

from utils import repository
from utils.database import ObjectDatabase


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = tempfile.mkdtemp()
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_repo(temp_dir):
    # Creates an initialized Cairn repository in a temporary directory
    original_dir = os.getcwd()
    os.chdir(temp_dir)

    os.makedirs(os.path.join(temp_dir, '.cairn', 'objects'))

    yield temp_dir

    os.chdir(original_dir)


@pytest.fixture
def database(temp_repo):
    # Object database rooted in the temporary repository
    return ObjectDatabase(repository.object_storage_root(temp_repo))


@pytest.fixture
def sample_dir(temp_dir):
    # a.txt = "hello", d/b.txt = "world"
    root = os.path.join(temp_dir, 'sample')
    write(root, 'a.txt', b'hello')
    write(root, 'd/b.txt', b'world')
    return root


def write(root, rel_path, data):
    path = os.path.join(root, *rel_path.split('/'))
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'wb') as f:
        f.write(data)
    return path


def read(root, rel_path):
    with open(os.path.join(root, *rel_path.split('/')), 'rb') as f:
        return f.read()


# Mock args object for command functions
class MockArgs:
    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)
