# Shared pytest fixtures for nest tests

import pytest
import os
import sys
import shutil
import tempfile

# Add nest-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'nest-project'))

from utils.filesystem import LocalFileSystem, MemoryFileSystem
from utils.repository import RepositoryManager


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
def memory_fs():
    return MemoryFileSystem()


@pytest.fixture(params=['local', 'memory'])
def sandbox(request, temp_dir):
    # A (file system, base directory) pair, run once against the real disk and once in memory
    if request.param == 'local':
        return LocalFileSystem(), temp_dir
    fs = MemoryFileSystem()
    fs.create_directory('/sandbox', recursive=True)
    return fs, '/sandbox'


@pytest.fixture
def manager(sandbox):
    fs, _ = sandbox
    return RepositoryManager(fs)


@pytest.fixture
def repo_path(sandbox):
    # A location that does not exist yet
    _, base = sandbox
    return os.path.join(base, 'test')


def assert_layout(fs, meta_dir, present=True):
    # Checks the files and directories init creates
    for name in ('HEAD', 'config', 'objects', os.path.join('refs', 'heads'), os.path.join('refs', 'tags')):
        assert fs.exists(os.path.join(meta_dir, name)) is present, name


def read_text(fs, path):
    if isinstance(fs, MemoryFileSystem):
        return fs.read_file(path)
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return f.read()


# Mock args object for command functions
class MockArgs:
    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)
