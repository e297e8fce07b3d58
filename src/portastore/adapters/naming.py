# Licensed under the Apache License, Version 2.0
from __future__ import annotations

from typing import Iterator


def unique_candidates(name: str) -> Iterator[str]:
    """
    Yield alternative names for `name` when it is already taken:
    "notes.txt" -> "notes (2).txt", "notes (3).txt", ...

    Dot-files and names without a suffix get the counter appended.
    """
    dot = name.rfind(".")
    if dot <= 0:
        stem, suffix = name, ""
    else:
        stem, suffix = name[:dot], name[dot:]
    n = 2
    while True:
        yield f"{stem} ({n}){suffix}"
        n += 1


def validate_name(name: str, separators: str = "/") -> None:
    """Reject names that are empty, path-like, or relative-path markers."""
    if not name or name in (".", ".."):
        raise ValueError(f"Invalid storage name: {name!r}")
    for sep in separators:
        if sep in name:
            raise ValueError(f"Storage name must not contain {sep!r}: {name!r}")
