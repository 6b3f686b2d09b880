# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import re
from functools import lru_cache

from .log import InvalidPath


__all__ = ["parse_path", "join_path", "is_index_key", "alternate_key"]


SEPARATOR = "."

# A segment is a (possibly empty) head followed by any number of [n] groups
_segment = re.compile(r"(?P<head>[^\[\]]*)(?P<indices>(?:\[[0-9]+\])*)")
_index = re.compile(r"\[([0-9]+)\]")
# Canonical integers only: "007" stays a string key
_integer = re.compile(r"0|[1-9][0-9]*")


def is_index_key(key):
    "Integer keys address array-like branches; bool is not an index."
    return isinstance(key, int) and not isinstance(key, bool)


def alternate_key(key):
    """Return the other spelling of an index key, or None.

    1 and "1" address the same entry, since trees loaded from
    json only ever carry string keys.
    """
    if is_index_key(key):
        return str(key)
    if isinstance(key, str) and _integer.fullmatch(key):
        return int(key)
    return None


def _parse_segment(segment, path):
    m = _segment.fullmatch(segment)
    if m is None:
        raise InvalidPath("Unparseable bracket group in segment {!r} of path {!r}.".format(
            segment, path))
    head = m.group("head")
    indices = [int(i) for i in _index.findall(m.group("indices"))]
    if not head:
        if not indices:
            raise InvalidPath("Empty segment in path {!r}.".format(path))
        return indices
    if _integer.fullmatch(head):
        head = int(head)
    return [head] + indices


@lru_cache(maxsize=1024)
def _parse_path(path):
    if not path:
        raise InvalidPath("Path must not be empty.")
    keys = []
    for segment in path.split(SEPARATOR):
        keys.extend(_parse_segment(segment, path))
    return tuple(keys)


def parse_path(path):
    """Split a path on the form 'a.b[1].c' into ('a', 'b', 1, 'c').

    Segments are separated by dots. Each segment may carry trailing
    [n] groups, which become separate integer keys, so 'a.b[1].c'
    and 'a.b.1.c' parse to the same keys. A segment spelling an
    integer without leading zeros is an integer key. Anything else,
    "007" included, is a string key.

    Raises InvalidPath for empty paths, empty segments, and
    malformed bracket groups.
    """
    if not isinstance(path, str):
        raise TypeError("Path must be a string, not {}.".format(type(path).__name__))
    return _parse_path(path)


def join_path(keys):
    "Join keys on the form ('a', 'b', 1) into 'a.b.1'."
    return SEPARATOR.join(str(k) for k in keys)
