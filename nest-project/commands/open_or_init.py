# The command: nest open-or-init [<path>] [--bare] [-b <branch>]
# What it does: Opens the repository at <path>, creating it first when the path does not exist
# How it does: `RepositoryManager.open_or_init` opens, falls back to init on RepoNotFound,
# and fails when the existing repository's mode is not the one asked for
# What data structure it uses: Finite State Machine (open -> compare mode, or open -> init)

import sys
from utils.errors import RepoError
from utils.repository import RepositoryManager
from . import open as open_command

def run(args, fs=None):
    try:
        repo = RepositoryManager(fs).open_or_init(args.path, bare=args.bare, default_branch=args.initial_branch)
    except (RepoError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    for line in open_command.describe(repo):
        print(line)
    return repo
