# What it does: Defines the failures a repository lifecycle call can end in
# How it does: One exception class per recoverable outcome, all sharing `RepoError` so callers can catch them together.
# Filesystem failures are not wrapped: they stay the built-in `OSError` family and propagate as raised


class RepoError(Exception):
    pass


class RepoNotFound(RepoError): # Open was asked about a location that does not exist
    def __init__(self, path):
        super().__init__(f"{path}: no such repository location")
        self.path = path


class RepoLocationNotEmpty(RepoError): # Init refused a location that already has entries
    def __init__(self, path):
        super().__init__(f"{path} exists and is not empty")
        self.path = path


class RepoBareStatusMismatch(RepoError):
    """
    Raised by open_or_init when the repository found on disk is bare and a
    non-bare one was requested, or the other way around.
    """

    def __init__(self, path, requested, found):
        super().__init__(
            f"{path}: requested bare={str(requested).lower()} "
            f"but found bare={str(found).lower()}"
        )
        self.path = path
        self.requested = requested
        self.found = found
