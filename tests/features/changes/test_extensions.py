"""Tests for extension set parsing and matching."""

from pathlib import Path

import pytest

from pretti.config.config import DEFAULT_EXTENSIONS
from pretti.features.changes import MATCH_ALL, ExtensionSet


def test_empty_option_selects_defaults() -> None:
    extensions = ExtensionSet.parse("", DEFAULT_EXTENSIONS)
    assert extensions.suffixes == (".js", ".ts", ".json", ".tsx", ".jsx")
    assert not extensions.matches_all


def test_option_is_split_on_commas_in_order() -> None:
    extensions = ExtensionSet.parse(".md,.txt", DEFAULT_EXTENSIONS)
    assert extensions.suffixes == (".md", ".txt")


@pytest.mark.parametrize("raw", [",", ".md,", ",.md", ".md,,.txt"])
def test_empty_element_is_match_all_sentinel(raw: str) -> None:
    extensions = ExtensionSet.parse(raw, DEFAULT_EXTENSIONS)
    assert MATCH_ALL in extensions.suffixes
    assert extensions.matches_all
    assert extensions.matches(Path("/repo/Makefile"))


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("foo.js", True),
        ("foo.jsx", True),
        ("foo.JS", False),
        ("foo.mjs", True),
        ("foo.json.bak", False),
        ("dir.js/readme", False),
    ],
)
def test_suffix_match_is_literal_and_case_sensitive(path: str, expected: bool) -> None:
    extensions = ExtensionSet((".js", ".jsx"))
    assert extensions.matches(path) is expected


def test_js_does_not_match_jsx_alone() -> None:
    assert not ExtensionSet((".js",)).matches("foo.jsx")
