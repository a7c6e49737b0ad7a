"""
Tests for import path classification.
"""

import pytest

from go3mports.classify import PathClassifier
from go3mports.types import Category

from tests.infrastructure import OWN_ROOT


class TestPathClassifier:

    @pytest.mark.parametrize("path", ["fmt", "net/http", "encoding/json", "errors", "myproject/internal/db"])
    def test_paths_without_dot_are_stdlib(self, path):
        assert PathClassifier(OWN_ROOT).classify(path) is Category.STDLIB

    @pytest.mark.parametrize("root", ["", "fmt", "github.com/slomek", "net"])
    def test_stdlib_regardless_of_root(self, root):
        """A dotless path is stdlib even when it matches the root prefix."""
        assert PathClassifier(root).classify("fmt") is Category.STDLIB

    @pytest.mark.parametrize("path", [
        "github.com/slomek/go3mports",
        "github.com/slomek/x/y",
        "github.com/slomekother/lib",  # plain prefix match
    ])
    def test_own_paths_are_internal(self, path):
        assert PathClassifier(OWN_ROOT).classify(path) is Category.INTERNAL

    @pytest.mark.parametrize("path", [
        "github.com/pkg/errors",
        "golang.org/x/net/context",
        "gopkg.in/yaml.v2",
        "example.com/slomek",
    ])
    def test_other_dotted_paths_are_external(self, path):
        assert PathClassifier(OWN_ROOT).classify(path) is Category.EXTERNAL

    def test_never_returns_group_level_categories(self):
        classifier = PathClassifier(OWN_ROOT)
        for path in ["fmt", "github.com/pkg/errors", "github.com/slomek/a", "a.b"]:
            assert classifier.classify(path) not in (Category.MIXED, Category.UNKNOWN)
