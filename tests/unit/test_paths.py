# Unit tests for utils/paths.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'nest-project'))

from utils import paths


class TestNormalizePath:
    # Tests for paths.normalize_path()

    def test_collapses_separators_and_dots(self):
        assert paths.normalize_path('/repo//sub/../.') == os.path.normpath('/repo')

    def test_keeps_relative_paths_relative(self):
        assert paths.normalize_path('./repo/') == 'repo'

    def test_accepts_path_like(self, temp_dir):
        from pathlib import Path
        assert paths.normalize_path(Path(temp_dir) / 'x' / '..') == os.path.normpath(temp_dir)


class TestResolveMetaDir:
    # Tests for paths.resolve_meta_dir()

    def test_bare_is_the_working_path(self):
        assert paths.resolve_meta_dir('/repo/', bare=True) == os.path.normpath('/repo')

    def test_non_bare_nests_dot_git(self):
        assert paths.resolve_meta_dir('/repo/./', bare=False) == os.path.join(os.path.normpath('/repo'), '.git')

    def test_layout_path_splits_forward_slashes(self):
        assert paths.layout_path('/repo/.git', 'refs/heads') == os.path.join('/repo/.git', 'refs', 'heads')
