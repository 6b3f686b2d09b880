# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import ChangeFormatError, InvalidPath
from .paths import parse_path


# Sentinel to allow None as a value
Missing = object()


class ChangeRecord(dict):
    """One entry of a changelog produced by diff.

    Minimal class providing attribute access to the record keys,
    while staying a plain dict for comparisons and serialization.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class ChangeAction:
    "Collection of valid values for the action field in change records."
    ADD = "add"
    REMOVE = "remove"
    CHANGE = "change"


ACTIONS = (
    ChangeAction.ADD,
    ChangeAction.REMOVE,
    ChangeAction.CHANGE,
    )


def op_add(path, value):
    "Create a change record for a leaf path that appeared with value."
    return ChangeRecord(action=ChangeAction.ADD, path=path, value=value)

def op_remove(path):
    "Create a change record for a leaf path that disappeared."
    return ChangeRecord(action=ChangeAction.REMOVE, path=path)

def op_change(path, value):
    "Create a change record for a leaf path whose value is now value."
    return ChangeRecord(action=ChangeAction.CHANGE, path=path, value=value)


def to_change_records(changes):
    """Convert a list of plain dicts, such as a changelog loaded
    from json, to ChangeRecord objects.

    Values are left untouched, only the records themselves are
    converted. Raises a ChangeFormatError if the result is not
    a well formed changelog.
    """
    if not isinstance(changes, list):
        raise ChangeFormatError("Changelog must be a list.")
    records = [ChangeRecord(c) if isinstance(c, dict) else c for c in changes]
    validate_changes(records)
    return records


def is_valid_changes(changes):
    """Checks whether a changelog (list of change records) is well formed.

    Returns a boolean indicating the well-formedness of the changelog.
    """
    try:
        validate_changes(changes)
    except ChangeFormatError:
        return False
    return True


def validate_changes(changes):
    """Check whether a changelog (list of change records) is well formed.

    Raises a ChangeFormatError if not well formed.
    """
    if not isinstance(changes, list):
        raise ChangeFormatError("Changelog must be a list.")
    for c in changes:
        validate_change(c)


def validate_change(c):
    """Check that c is a well formed change record.

    Raises a ChangeFormatError if not well formed.
    """
    if not isinstance(c, ChangeRecord):
        raise ChangeFormatError("Change entry '{}' is not a change record.".format(c))

    action = c.get("action")
    if action not in ACTIONS:
        raise ChangeFormatError("Unknown change action '{}'.".format(action))

    path = c.get("path")
    if not isinstance(path, str):
        raise ChangeFormatError(
            "Change path '{}' of type '{}' is not a string.".format(path, type(path)))
    try:
        parse_path(path)
    except InvalidPath as e:
        raise ChangeFormatError("Invalid change path: {}".format(e)) from e

    if action == ChangeAction.REMOVE:
        if "value" in c:
            raise ChangeFormatError("remove expects no value, got '{}'.".format(c["value"]))
    elif "value" not in c:
        raise ChangeFormatError("{} expects a value at path '{}'.".format(action, path))

    # Values are not checked, they can be arbitrary leaves
