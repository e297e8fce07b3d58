# Licensed under the Apache License, Version 2.0
from enum import Enum


class RootCategory(Enum):
    """Well-known storage root a handle was obtained from."""

    LOCAL = "local"
    ROAMING = "roaming"


class CreationCollisionOption(Enum):
    """What a create call does when the desired name is already taken."""

    GENERATE_UNIQUE_NAME = "generate_unique_name"
    REPLACE_EXISTING = "replace_existing"
    FAIL_IF_EXISTS = "fail_if_exists"
    OPEN_IF_EXISTS = "open_if_exists"


class NameCollisionOption(Enum):
    """What a rename/move does when the target name is already taken."""

    GENERATE_UNIQUE_NAME = "generate_unique_name"
    REPLACE_EXISTING = "replace_existing"
    FAIL_IF_EXISTS = "fail_if_exists"


class ExistenceCheckResult(Enum):
    NOT_FOUND = "not_found"
    FILE_EXISTS = "file_exists"
    FOLDER_EXISTS = "folder_exists"
