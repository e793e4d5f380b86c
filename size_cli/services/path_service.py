"""Flatten nested path specs into a plain list of path strings."""
from __future__ import annotations

import os
from typing import Iterable, List, Sequence, Union

PathSpec = Union[str, "os.PathLike[str]", Sequence["PathSpec"]]


def _is_leaf(item) -> bool:
    return isinstance(item, (str, os.PathLike))


def expand_paths(spec: PathSpec) -> List[str]:
    """Depth-first, pre-order flatten of ``spec``.

    Strings and path-like objects are leaves; any other iterable is a branch.
    A branch that contains itself (directly or further down) raises
    ValueError instead of looping forever.
    """
    if _is_leaf(spec):
        return [os.fspath(spec)]
    out: List[str] = []
    stack = [iter(spec)]
    active = [id(spec)]
    while stack:
        try:
            item = next(stack[-1])
        except StopIteration:
            stack.pop()
            active.pop()
            continue
        if _is_leaf(item):
            out.append(os.fspath(item))
        elif id(item) in active:
            raise ValueError("path spec contains itself")
        else:
            stack.append(iter(item))
            active.append(id(item))
    return out


def split_tokens(tokens: Iterable[str]) -> List[str]:
    """Split comma-joined command-line tokens ("a,b,c") into separate specs."""
    out = []
    for token in tokens:
        out.extend(part.strip() for part in token.split(",") if part.strip())
    return out
