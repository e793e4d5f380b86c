#!/usr/bin/env python3
"""Resolve path specs to a deduplicated file set and summarise its sizes."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from ..core.errors import PathNotFoundError
from ..utils import disk
from ..utils.disk import Entry
from .path_service import PathSpec, expand_paths

PATH_NOT_FOUND = "path-not-found"
IO_ERROR = "io-error"
NO_FILES_FOUND = "no-files-found"


@dataclass(frozen=True)
class CollectWarning:
    """Non-fatal problem met while collecting; ``path`` is None for run-wide ones."""
    kind: str
    path: Optional[str]
    message: str


@dataclass(frozen=True)
class SizeStats:
    count: int = 0
    sum: int = 0
    average: float = 0.0
    min: int = 0
    max: int = 0

    @classmethod
    def of(cls, sizes: Sequence[int]) -> "SizeStats":
        if not sizes:
            return cls()
        total = sum(sizes)
        return cls(
            count=len(sizes),
            sum=total,
            average=total / len(sizes),
            min=min(sizes),
            max=max(sizes),
        )


@dataclass
class CollectResult:
    files: List[Entry] = field(default_factory=list)
    stats: SizeStats = field(default_factory=SizeStats)
    warnings: List[CollectWarning] = field(default_factory=list)


def dedupe_sorted(entries: Sequence[Entry]) -> List[Entry]:
    """Drop entries whose path equals the previous kept one.

    Only correct on flat input already sorted by path.
    """
    out: List[Entry] = []
    for entry in entries:
        if out and out[-1].path == entry.path:
            continue
        out.append(entry)
    return out


def collect(
    specs: PathSpec,
    include_hidden: bool = False,
    cwd: Optional[str] = None,
    exists: Callable[..., bool] = disk.path_exists,
    list_entries: Callable[..., List[Entry]] = disk.list_entries,
) -> CollectResult:
    """Collect the regular files named by ``specs`` and their SizeStats.

    Specs are processed in the order given. A spec that matches nothing or
    fails with an OSError is reported as a warning and skipped; the rest of
    the run carries on. ``exists`` and ``list_entries`` default to the local
    filesystem and can be replaced with other implementations.
    """
    result = CollectResult()
    merged: List[Entry] = []
    for spec in expand_paths(specs):
        try:
            if not exists(spec, cwd=cwd, include_hidden=include_hidden):
                result.warnings.append(CollectWarning(PATH_NOT_FOUND, spec, f"Path not found: {spec}"))
                continue
            merged.extend(list_entries(spec, recursive=True, include_hidden=include_hidden, cwd=cwd))
        except PathNotFoundError:
            result.warnings.append(CollectWarning(PATH_NOT_FOUND, spec, f"Path not found: {spec}"))
        except OSError as e:
            result.warnings.append(CollectWarning(IO_ERROR, spec, f"Cannot read {spec}: {e}"))

    merged.sort(key=lambda e: e.path)
    files = [e for e in merged if not e.is_dir]
    result.files = dedupe_sorted(files)
    result.stats = SizeStats.of([e.size for e in result.files])
    if not result.files:
        result.warnings.append(CollectWarning(NO_FILES_FOUND, None, "No files found"))
    return result
