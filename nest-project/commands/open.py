# The command: nest open [<path>]
# What it does: Reports whether <path> is a bare or non-bare repository and where its metadata lives
# How it does: `RepositoryManager.open` fails when the path is missing, otherwise the mode comes from the presence of `.git`
# What data structure it uses: None directly, it prints the fields of the Repository handle

import sys
from utils.errors import RepoError
from utils.repository import RepositoryManager

def describe(repo): # The lines printed for an opened repository
    return [
        f"working path: {repo.working_path}",
        f"metadata dir: {repo.meta_dir}",
        f"mode: {repo.mode.value}",
    ]

def run(args, fs=None):
    try:
        repo = RepositoryManager(fs).open(args.path)
    except (RepoError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    for line in describe(repo):
        print(line)
    return repo
