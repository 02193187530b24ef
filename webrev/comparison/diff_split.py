"""Split a multi-file git diff into per-file changes."""

import re

from ..errors import ComparisonError
from ..models import FileChange, FileStatus


# Either side may be a C-style quoted path when it holds unusual characters
_DIFF_GIT_RE = re.compile(r'^diff --git ("(?:[^"\\]|\\.)*"|a/.+?) ("(?:[^"\\]|\\.)*"|b/.+)$')
_ESCAPE_RE = re.compile(rb"\\([0-7]{3}|.)")
_ESCAPES = {
    b"a": b"\a",
    b"b": b"\b",
    b"f": b"\f",
    b"n": b"\n",
    b"r": b"\r",
    b"t": b"\t",
    b"v": b"\v",
    b'"': b'"',
    b"\\": b"\\",
}


def _unquote(path: str) -> str:
    """Decode a path git wrote as ``"..."`` with backslash and octal escapes."""
    if len(path) < 2 or not (path.startswith('"') and path.endswith('"')):
        return path

    def replace(match: re.Match) -> bytes:
        escape = match.group(1)
        if len(escape) == 3:
            return bytes([int(escape, 8)])
        if escape not in _ESCAPES:
            raise ComparisonError(f"Invalid escape in quoted path: {path}")
        return _ESCAPES[escape]

    # Octal escapes are UTF-8 bytes, so decode only after all are replaced
    return _ESCAPE_RE.sub(replace, path[1:-1].encode("utf-8")).decode("utf-8", errors="replace")


def _strip_prefix(path: str) -> str:
    if path.startswith(("a/", "b/")):
        return path[2:]
    return path


def _strip_side(path: str) -> str | None:
    """Turn ``a/foo`` / ``b/foo`` / ``/dev/null`` from ---/+++ lines into a path."""
    if path.startswith('"'):
        return _strip_prefix(_unquote(path))
    path = path.split("\t", 1)[0]
    if path == "/dev/null":
        return None
    return _strip_prefix(path)


def _parse_section(section: str) -> FileChange:
    lines = section.split("\n")
    header_match = _DIFF_GIT_RE.match(lines[0])
    old_path = _strip_prefix(_unquote(header_match.group(1))) if header_match else None
    new_path = _strip_prefix(_unquote(header_match.group(2))) if header_match else None

    status = FileStatus.MODIFIED
    previous_filename: str | None = None
    is_binary = False
    body_start: int | None = None

    for i, line in enumerate(lines[1:], start=1):
        if line.startswith("@@"):
            body_start = i
            break
        if line.startswith("new file mode"):
            status = FileStatus.ADDED
        elif line.startswith("deleted file mode"):
            status = FileStatus.DELETED
        elif line.startswith("rename from "):
            status = FileStatus.RENAMED
            previous_filename = _unquote(line[len("rename from ") :])
        elif line.startswith("rename to "):
            new_path = _unquote(line[len("rename to ") :])
        elif line.startswith("copy from "):
            status = FileStatus.COPIED
            previous_filename = _unquote(line[len("copy from ") :])
        elif line.startswith("copy to "):
            new_path = _unquote(line[len("copy to ") :])
        elif line.startswith("--- "):
            old_path = _strip_side(line[4:]) or old_path
        elif line.startswith("+++ "):
            new_path = _strip_side(line[4:]) or new_path
        elif line.startswith("Binary files "):
            is_binary = True

    filename = new_path if status is not FileStatus.DELETED else (old_path or new_path)
    if filename is None:
        raise ComparisonError(f"Cannot determine file name from diff header: {lines[0]!r}")

    patch: str | None = None
    additions = deletions = 0
    if body_start is not None and not is_binary:
        body = lines[body_start:]
        while body and body[-1] == "":
            body.pop()
        for line in body:
            if line.startswith("+"):
                additions += 1
            elif line.startswith("-"):
                deletions += 1
        patch = "\n".join(body) + "\n"

    return FileChange(
        filename=filename,
        status=status,
        patch=patch,
        previous_filename=previous_filename,
        additions=additions,
        deletions=deletions,
        changes=additions + deletions,
    )


def split_diff(raw_diff: str) -> list[FileChange]:
    """Split a ``git diff`` output into one FileChange per file.

    Status comes from the extended header lines (``new file mode``,
    ``deleted file mode``, ``rename from``, ``copy from``). Binary files get
    ``patch=None``.

    Args:
        raw_diff: Full multi-file unified diff text.

    Returns:
        File changes in diff order; empty for an empty diff.

    Raises:
        ComparisonError: If a section names no file or has a bad quoted path.
    """
    if not raw_diff:
        return []

    # Split diff into per-file sections on "diff --git" boundaries
    sections = re.split(r"(?=^diff --git )", raw_diff, flags=re.MULTILINE)
    return [_parse_section(section) for section in sections if section.startswith("diff --git")]
