"""Filesystem primitives for size-cli: existence checks and recursive listing."""
import glob
import os
import stat
import sys
from typing import Iterator, List, NamedTuple, Optional

from ..core.constants import GLOB_CHARS
from ..core.errors import PathNotFoundError

HIDDEN_ATTRS = getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0x2) | getattr(stat, "FILE_ATTRIBUTE_SYSTEM", 0x4)


class Entry(NamedTuple):
    """One listed filesystem entry; ``path`` is absolute and normalised."""
    path: str
    is_dir: bool
    size: int


def is_glob(spec: str) -> bool:
    return any(c in spec for c in GLOB_CHARS)


def full_path(spec: str, cwd: Optional[str] = None) -> str:
    """Absolute, normalised path of ``spec`` resolved against ``cwd``."""
    spec = os.path.expanduser(spec)
    if not os.path.isabs(spec):
        spec = os.path.join(cwd or os.getcwd(), spec)
    return os.path.normcase(os.path.abspath(spec))


def canonical_path(path: str) -> str:
    """Symlink-free, normalised form of an existing path; the identity of a match."""
    return os.path.normcase(os.path.realpath(path))


def is_hidden(path: str) -> bool:
    """Dot-names everywhere; hidden/system attribute where the platform has one."""
    name = os.path.basename(path.rstrip(os.sep)) or path
    if name.startswith(".") and name not in (".", ".."):
        return True
    if sys.platform == "win32":
        try:
            attrs = getattr(os.lstat(path), "st_file_attributes", 0)
        except OSError:
            return False
        return bool(attrs & HIDDEN_ATTRS)
    return False


def _matches(spec: str, cwd: Optional[str], include_hidden: bool) -> List[str]:
    """Paths a spec names: glob matches, or the path itself if it exists."""
    if not is_glob(spec):
        p = full_path(spec, cwd)
        return [canonical_path(p)] if os.path.exists(p) else []
    pattern = os.path.expanduser(spec)
    if not os.path.isabs(pattern):
        pattern = os.path.join(glob.escape(cwd or os.getcwd()), pattern)
    found = glob.glob(pattern, recursive=True, include_hidden=include_hidden)
    out = []
    for p in found:
        if not include_hidden and is_hidden(os.path.abspath(p)):
            continue
        out.append(canonical_path(p))
    return sorted(set(out))


def path_exists(spec: str, cwd: Optional[str] = None, include_hidden: bool = False) -> bool:
    """True if ``spec`` names an existing path or a glob matching at least one."""
    return bool(_matches(spec, cwd, include_hidden))


def _raise(err: OSError):
    raise err


def _file_entry(path: str) -> Optional[Entry]:
    try:
        st = os.stat(path)
    except FileNotFoundError:
        if os.path.islink(path):
            return None  # dangling symlink
        raise
    if stat.S_ISDIR(st.st_mode):
        return Entry(path, True, 0)
    if not stat.S_ISREG(st.st_mode):
        return None
    return Entry(path, False, st.st_size)


def _walk(top: str, recursive: bool, include_hidden: bool) -> Iterator[Entry]:
    for root, dirs, files in os.walk(top, onerror=_raise, followlinks=False):
        if not include_hidden:
            dirs[:] = [d for d in dirs if not is_hidden(os.path.join(root, d))]
        for d in dirs:
            yield Entry(os.path.join(root, d), True, 0)
        for name in files:
            fp = os.path.join(root, name)
            if not include_hidden and is_hidden(fp):
                continue
            entry = _file_entry(fp)
            if entry is not None:
                yield entry
        if not recursive:
            break


def list_entries(spec: str, recursive: bool = True, include_hidden: bool = False,
                 cwd: Optional[str] = None) -> List[Entry]:
    """List every entry a path spec covers.

    A file yields itself; a directory yields its contents (not itself),
    recursively unless ``recursive`` is False. Symlinked directories below a
    named directory are listed but not descended into. Raises
    PathNotFoundError when the spec matches nothing; any other OSError
    raised during the traversal propagates to the caller.
    """
    matches = _matches(spec, cwd, include_hidden)
    if not matches:
        raise PathNotFoundError(spec)
    out: List[Entry] = []
    for match in matches:
        if os.path.isdir(match):
            out.extend(_walk(match, recursive, include_hidden))
        else:
            entry = _file_entry(match)
            if entry is not None:
                out.append(entry)
    return out
