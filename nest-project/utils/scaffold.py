# What it does: Lays out a brand new repository: the metadata directory, `objects`, `refs/heads`, `refs/tags`, `HEAD` and `config`
# How it does: Issues one file system call per step, in a fixed order, each finishing before the next starts.
# Nothing is rolled back, so a failure halfway leaves the steps already done on disk and the error goes to the caller
# What data structure it uses: Tree (the directory structure being created)

from .config import render_core_config
from .log import get_logger
from .paths import CONFIG_FILE, HEAD_FILE, LAYOUT_DIRS, layout_path, normalize_path, resolve_meta_dir

logger = get_logger(__name__)


def head_contents(default_branch): # The symbolic ref HEAD starts with, no trailing newline
    return f"ref: refs/heads/{default_branch}"


def scaffold(fs, working_path, bare, default_branch):
    """
    Creates the layout for a new repository and returns its metadata directory.

    The caller is responsible for checking that ``working_path`` is absent or
    empty; a non-bare scaffold fails if ``.git`` is already there.
    """
    working_path = normalize_path(working_path)
    fs.create_directory(working_path, recursive=True)

    meta_dir = resolve_meta_dir(working_path, bare)
    if not bare:
        fs.create_directory(meta_dir, recursive=False)

    for name in LAYOUT_DIRS:
        fs.create_directory(layout_path(meta_dir, name), recursive=True)

    fs.write_file(layout_path(meta_dir, HEAD_FILE), head_contents(default_branch))
    fs.write_file(layout_path(meta_dir, CONFIG_FILE), render_core_config(bare))

    logger.debug("scaffolded %s (bare=%s, branch=%s)", meta_dir, bare, default_branch)
    return meta_dir
