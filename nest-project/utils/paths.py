# What it does: Names every file and directory of the repository layout and derives where the metadata directory lives
# How it does: Normalizes the caller's path lexically with `os.path.normpath` and joins `.git` onto it unless the repository is bare
# What data structure it uses: Tree (paths are addresses in the file system tree), Tuple (the fixed list of layout directories)

import os

META_DIR_NAME = '.git'
HEAD_FILE = 'HEAD'
CONFIG_FILE = 'config'

# Created under the metadata directory, in this order
LAYOUT_DIRS = ('objects', 'refs/heads', 'refs/tags')


def normalize_path(path): # Collapses separators and resolves '.' and '..' without touching the disk
    return os.path.normpath(os.fspath(path))


def resolve_meta_dir(working_path, bare): # Returns the directory that holds HEAD, config, objects and refs
    working_path = normalize_path(working_path)
    if bare:
        return working_path
    return os.path.join(working_path, META_DIR_NAME)


def layout_path(meta_dir, name): # Joins a forward-slash layout name onto the metadata directory
    return os.path.join(meta_dir, *name.split('/'))
