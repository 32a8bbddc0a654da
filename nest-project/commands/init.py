# The command: nest init [<path>] [--bare] [-b <branch>]
# What it does: Creates a new, empty repository at <path> (the current directory by default)
# How it does: Hands the path and options to `RepositoryManager.init`, which refuses any location that already has entries,
# then reports where the metadata directory was created
# What data structure it uses: Tree (the file system directory structure is a tree)

import os
import sys
from utils.errors import RepoError
from utils.repository import RepositoryManager

def run(args, fs=None):
    try:
        repo = RepositoryManager(fs).init(args.path, bare=args.bare, default_branch=args.initial_branch)
    except (RepoError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Initialized empty {'bare ' if repo.bare else ''}repository in {os.path.abspath(repo.meta_dir)}/")
    return repo
