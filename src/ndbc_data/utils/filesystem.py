"""Filesystem utilities for NDBC data output."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def gitignore_rule(out_dir: Path) -> str:
    """Ignore rule for the output directory, e.g. ``/data``."""
    return f"/{out_dir.as_posix().strip('/')}"


def ensure_gitignore_entry(gitignore_path: Path, rule: str) -> bool:
    """Add ``rule`` as a line of the ignore file unless it is already there.

    The file is created if missing.

    Returns:
        True if the file was changed
    """
    if gitignore_path.exists():
        text = gitignore_path.read_text()
        if rule in text.splitlines():
            return False
        if text and not text.endswith("\n"):
            text += "\n"
        gitignore_path.write_text(f"{text}{rule}\n")
        logger.debug(f"Added {rule} to {gitignore_path}")
    else:
        gitignore_path.write_text(f"{rule}\n")
        logger.debug(f"Created {gitignore_path} with {rule}")
    return True


def ensure_data_dir(
    out_dir: Path,
    gitignore_path: Path | None = None,
) -> None:
    """Create the output directory and keep it out of version control.

    Args:
        out_dir: Output directory
        gitignore_path: Ignore file to update, or None to leave it alone
    """
    if not out_dir.exists():
        out_dir.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Created directory: {out_dir}")

    if gitignore_path is not None:
        ensure_gitignore_entry(gitignore_path, gitignore_rule(out_dir))


def format_bytes(size_bytes: int) -> str:
    """Format bytes as human-readable string.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string (e.g., "1.23 MB")
    """
    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if abs(size_bytes) < 1024.0:
            return f"{size_bytes:.2f} {unit}"
        size_bytes /= 1024.0  # type: ignore
    return f"{size_bytes:.2f} PB"
