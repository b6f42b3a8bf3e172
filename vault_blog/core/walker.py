"""Recursive file discovery under a vault root."""

from pathlib import Path
from typing import Iterable, List, Optional, Union


def _normalize_extensions(extensions: Optional[Iterable[str]]) -> Optional[set]:
    if extensions is None:
        return None
    return {ext[1:] if ext.startswith('.') else ext for ext in extensions}


def walk_directory_with_filter(
    root: Union[str, Path],
    extensions: Optional[Iterable[str]] = None,
) -> List[Path]:
    """Find every file below root, descending into subdirectories.

    Args:
        root: Directory to walk
        extensions: Allowed extensions, with or without a leading dot.
                    Matching is case-sensitive. None keeps every file.

    Returns:
        Absolute file paths in directory enumeration order

    Raises:
        OSError: If any directory cannot be read (missing root, permissions).
                 No partial results are returned.
    """
    allowed = _normalize_extensions(extensions)
    files: List[Path] = []

    def walk(current: Path) -> None:
        for entry in current.iterdir():
            if entry.is_dir() and not entry.is_symlink():
                walk(entry)
                continue
            extension = entry.suffix[1:]
            if allowed is None or extension in allowed:
                files.append(entry)

    walk(Path(root).absolute())
    return files
