"""
File Utilities Module
Common file operations and path handling functions.
"""

import os
import tempfile
from pathlib import Path
from typing import List

def normalize_path(path: str | Path) -> Path:
    """Convert string path to normalized Path object."""
    return Path(path).resolve()

def is_hidden(path: Path) -> bool:
    """Check if a file or directory is hidden."""
    # Check for hidden files/directories in Unix-like systems
    if path.name.startswith('.'):
        return True

    # Check for hidden files/directories in Windows
    try:
        import ctypes
        attrs = ctypes.windll.kernel32.GetFileAttributesW(str(path))
        return attrs & 2 != 0
    except (AttributeError, ImportError):
        return False

def get_all_files_by_suffix(path: str | Path, suffix: str, exclude_dirs: List[str] = None) -> List[Path]:
    """
    Recursively collect all files whose name ends with ``suffix``.

    Args:
        path: Base directory path
        suffix: File name ending to match (e.g. '.module.css')
        exclude_dirs: Directory names that are never descended into

    Returns:
        Sorted list of Path objects for matching files
    """
    base_path = normalize_path(path)
    excluded = set(exclude_dirs or ['node_modules'])
    suffix = suffix.lower()
    matching_files = []

    for root, dirs, files in os.walk(base_path):
        # Skip hidden and excluded directories
        dirs[:] = [d for d in dirs if d not in excluded and not is_hidden(Path(root) / d)]

        for file in files:
            file_path = Path(root) / file

            if is_hidden(file_path):
                continue

            if file.lower().endswith(suffix):
                matching_files.append(file_path)

    # os.walk order depends on the filesystem
    return sorted(matching_files)

def ensure_directory(directory: Path) -> None:
    """Ensure directory exists, create if necessary."""
    directory.mkdir(parents=True, exist_ok=True)

def read_file_content(file_path: Path) -> str:
    """
    Safely read file content with proper encoding.

    Args:
        file_path: Path to the file to read

    Returns:
        File contents as string

    Raises:
        FileNotFoundError: If file doesn't exist
        IOError: If file can't be read
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError:
        # Fallback to system default encoding if UTF-8 fails
        with open(file_path, 'r') as f:
            return f.read()

def write_file_atomic(file_path: Path, content: str) -> None:
    """
    Replace the content of ``file_path`` in one step.

    The content goes to a temporary file in the same directory which is then
    renamed over the target, so readers see either the old or the new file.

    Raises:
        OSError: If the temporary file can't be written or renamed
    """
    file_path = Path(file_path)
    fd, temp_name = tempfile.mkstemp(prefix=f'.{file_path.name}.', suffix='.tmp', dir=file_path.parent)
    try:
        # newline='' keeps '\n' line endings on every platform
        with os.fdopen(fd, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
        # mkstemp creates owner-only files
        os.chmod(temp_name, 0o644)
        os.replace(temp_name, file_path)
    except BaseException:
        if os.path.exists(temp_name):
            os.unlink(temp_name)
        raise
