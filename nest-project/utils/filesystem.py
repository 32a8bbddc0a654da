# What it does: The only place where repository code touches storage. Everything above it talks to a `FileSystem` object
# How it does: `FileSystem` declares the four operations the lifecycle needs. `LocalFileSystem` maps them onto the `os` module,
# `MemoryFileSystem` keeps a private tree in memory so tests and sandboxes never write to disk
# What data structure it uses: Set (directory paths) and Map / Dictionary (file path -> text) for the in-memory tree

import errno
import os
from abc import ABC, abstractmethod


class FileSystem(ABC):
    """
    Storage operations used by the repository lifecycle.

    Failures are reported with the built-in ``OSError`` subclasses
    (``FileNotFoundError``, ``FileExistsError``, ``NotADirectoryError``...)
    so callers can treat every provider the same way.
    """

    @abstractmethod
    def exists(self, path):
        ...

    @abstractmethod
    def create_directory(self, path, recursive=False):
        """Create ``path``. Without ``recursive`` the parent must exist and ``path`` must not."""

    @abstractmethod
    def write_file(self, path, contents):
        ...

    @abstractmethod
    def list_directory_entries(self, path):
        ...


class LocalFileSystem(FileSystem):
    def exists(self, path):
        return os.path.exists(path)

    def create_directory(self, path, recursive=False):
        if recursive:
            os.makedirs(path, exist_ok=True)
        else:
            os.mkdir(path)

    def write_file(self, path, contents):
        # newline='' keeps the text byte-exact on every platform
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(contents)

    def list_directory_entries(self, path):
        return os.listdir(path)


def _error(cls, code, path):
    return cls(code, os.strerror(code), path)


class MemoryFileSystem(FileSystem):
    """
    A file system that lives in a dict. Paths are normalized lexically. The
    root (``/``), the current directory (``.``) and any run of parent
    references (``..``, ``../..``) always exist.
    """

    def __init__(self):
        self._dirs = set()
        self._files = {}

    def _key(self, path):
        return os.path.normpath(os.fspath(path))

    def _is_root(self, key): # Directories that are never created, only referred to
        if key in (os.sep, os.curdir):
            return True
        return all(part == os.pardir for part in key.split(os.sep))

    def _is_dir(self, key):
        return key in self._dirs or self._is_root(key)

    def _parent(self, key):
        if self._is_root(key):
            return key
        return os.path.dirname(key) or os.curdir

    def _check_parent(self, key):
        parent = self._parent(key)
        if parent in self._files:
            raise _error(NotADirectoryError, errno.ENOTDIR, parent)
        if not self._is_dir(parent):
            raise _error(FileNotFoundError, errno.ENOENT, key)

    def exists(self, path):
        key = self._key(path)
        return self._is_dir(key) or key in self._files

    def is_dir(self, path):
        return self._is_dir(self._key(path))

    def create_directory(self, path, recursive=False):
        key = self._key(path)
        if key in self._files:
            raise _error(FileExistsError, errno.EEXIST, key)
        if self._is_dir(key):
            if recursive:
                return
            raise _error(FileExistsError, errno.EEXIST, key)
        if recursive:
            parent = self._parent(key)
            if parent != key:
                self.create_directory(parent, recursive=True)
        self._check_parent(key)
        self._dirs.add(key)

    def write_file(self, path, contents):
        key = self._key(path)
        if self._is_dir(key):
            raise _error(IsADirectoryError, errno.EISDIR, key)
        self._check_parent(key)
        self._files[key] = contents

    def read_file(self, path):
        key = self._key(path)
        if self._is_dir(key):
            raise _error(IsADirectoryError, errno.EISDIR, key)
        if key not in self._files:
            raise _error(FileNotFoundError, errno.ENOENT, key)
        return self._files[key]

    def list_directory_entries(self, path):
        key = self._key(path)
        if key in self._files:
            raise _error(NotADirectoryError, errno.ENOTDIR, key)
        if not self._is_dir(key):
            raise _error(FileNotFoundError, errno.ENOENT, key)
        entries = []
        for child in list(self._dirs) + list(self._files):
            if child != key and self._parent(child) == key:
                entries.append(os.path.basename(child))
        return sorted(entries)
