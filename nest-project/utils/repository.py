# What it does: The repository lifecycle. `init` creates a repository, `open` recognizes one, `open_or_init` opens or creates as needed
# How it does: Each call normalizes the path, probes the location through the injected file system and then either scaffolds a new layout
# or derives the handle from what is already there. Calls are sequential and take no locks: two processes running `init` on the same
# path at the same time race, and which one ends with RepoLocationNotEmpty is undefined. Callers that need that must lock externally
# What data structure it uses: Finite State Machine (absent / empty / populated location decides the outcome), immutable record for the handle

from dataclasses import dataclass
from enum import Enum

from .errors import RepoBareStatusMismatch, RepoLocationNotEmpty, RepoNotFound
from .filesystem import LocalFileSystem
from .log import get_logger
from .paths import normalize_path, resolve_meta_dir
from .probe import probe, probe_presence
from .scaffold import scaffold

logger = get_logger(__name__)

DEFAULT_BRANCH = 'main'


class RepoMode(Enum):
    BARE = 'bare'
    NON_BARE = 'non-bare'

    @classmethod
    def from_bare(cls, bare):
        return cls.BARE if bare else cls.NON_BARE


@dataclass(frozen=True)
class Repository:
    working_path: str
    meta_dir: str
    mode: RepoMode

    @property
    def bare(self):
        return self.mode is RepoMode.BARE

    @classmethod
    def at(cls, working_path, mode): # Builds a handle, deriving meta_dir the same way for every caller
        working_path = normalize_path(working_path)
        meta_dir = resolve_meta_dir(working_path, mode is RepoMode.BARE)
        return cls(working_path, meta_dir, mode)


class RepositoryManager:
    """
    Creates and opens repositories on one file system.

    The file system is the only dependency and is passed in explicitly;
    without one the manager works on the local disk.
    """

    def __init__(self, fs=None):
        self.fs = fs if fs is not None else LocalFileSystem()

    def init(self, working_path, bare=False, default_branch=DEFAULT_BRANCH):
        working_path = normalize_path(working_path)
        default_branch = default_branch or DEFAULT_BRANCH

        # Any entry at all, a leftover .git included, makes the location unusable
        state = probe(self.fs, working_path)
        if state.exists and not state.empty:
            raise RepoLocationNotEmpty(working_path)

        mode = RepoMode.from_bare(bare)
        meta_dir = scaffold(self.fs, working_path, bare, default_branch)
        logger.info("initialized %s repository in %s", mode.value, meta_dir)
        return Repository(working_path, meta_dir, mode)

    def open(self, working_path):
        working_path = normalize_path(working_path)
        state = probe_presence(self.fs, working_path)
        if not state.exists:
            raise RepoNotFound(working_path)

        # Presence of .git alone decides the mode, its contents are not checked
        mode = RepoMode.NON_BARE if state.has_meta_dir else RepoMode.BARE
        logger.debug("opened %s as %s", working_path, mode.value)
        return Repository.at(working_path, mode)

    def open_or_init(self, working_path, bare=False, default_branch=DEFAULT_BRANCH):
        try:
            repo = self.open(working_path)
        except RepoNotFound:
            logger.debug("%s not found, initializing", working_path)
            return self.init(working_path, bare=bare, default_branch=default_branch)

        if repo.bare != bool(bare):
            raise RepoBareStatusMismatch(repo.working_path, requested=bool(bare), found=repo.bare)
        return repo


def init(working_path, bare=False, default_branch=DEFAULT_BRANCH, fs=None):
    return RepositoryManager(fs).init(working_path, bare=bare, default_branch=default_branch)


def open_repo(working_path, fs=None):
    return RepositoryManager(fs).open(working_path)


def open_or_init(working_path, bare=False, default_branch=DEFAULT_BRANCH, fs=None):
    return RepositoryManager(fs).open_or_init(working_path, bare=bare, default_branch=default_branch)
