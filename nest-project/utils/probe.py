# What it does: Looks at a location before the lifecycle decides anything: does it exist, is it empty, does it hold a `.git` directory
# How it does: Read-only `exists` and `list_directory_entries` calls on the injected file system. I/O errors are left to propagate.
# `probe` lists the location and is what init needs; `probe_presence` never lists, so open works on any existing path, files included
# What data structure it uses: Named tuple (an immutable record of the three answers)

from collections import namedtuple

from .paths import normalize_path, resolve_meta_dir

ProbeResult = namedtuple('ProbeResult', ['exists', 'empty', 'has_meta_dir'])


def _has_meta_dir(fs, working_path): # Only the name is checked, the directory's contents are never read
    return fs.exists(resolve_meta_dir(working_path, bare=False))


def probe(fs, working_path):
    working_path = normalize_path(working_path)
    if not fs.exists(working_path):
        return ProbeResult(exists=False, empty=False, has_meta_dir=False)

    entries = fs.list_directory_entries(working_path)
    return ProbeResult(
        exists=True,
        empty=len(entries) == 0,
        has_meta_dir=_has_meta_dir(fs, working_path),
    )


def probe_presence(fs, working_path): # Like probe but without the listing; `empty` is left as None
    working_path = normalize_path(working_path)
    if not fs.exists(working_path):
        return ProbeResult(exists=False, empty=None, has_meta_dir=False)
    return ProbeResult(exists=True, empty=None, has_meta_dir=_has_meta_dir(fs, working_path))
