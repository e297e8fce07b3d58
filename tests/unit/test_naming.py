# tests/unit/test_naming.py
from itertools import islice

import pytest

from portastore.adapters.naming import unique_candidates, validate_name


def test_unique_candidates_keep_the_suffix():
    assert list(islice(unique_candidates("notes.txt"), 3)) == [
        "notes (2).txt",
        "notes (3).txt",
        "notes (4).txt",
    ]


@pytest.mark.parametrize("name, first", [("README", "README (2)"), (".bashrc", ".bashrc (2)")])
def test_unique_candidates_without_suffix(name, first):
    assert next(unique_candidates(name)) == first


@pytest.mark.parametrize("bad", ["", ".", "..", "a/b"])
def test_validate_name_rejects_path_like_names(bad):
    with pytest.raises(ValueError):
        validate_name(bad)


def test_validate_name_checks_every_separator():
    validate_name("a\\b")  # fine when only "/" separates
    with pytest.raises(ValueError):
        validate_name("a\\b", "/\\")
