"""
Root Resolver Module
Locates the project root and resolves configured directories against it.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)

# The front-end project's manifest marks its root
DEFAULT_ROOT_MARKER = 'package.json'


class ProjectRootNotFoundError(RuntimeError):
    """No ancestor directory contains the root marker file."""

    def __init__(self, start_dir: str, marker: str):
        self.start_dir = start_dir
        self.marker = marker
        super().__init__(f"Unable to find the root. No '{marker}' found above {start_dir}")


class RootResolver:
    """
    Finds the nearest ancestor directory holding a marker file.

    Lookups are cached per start directory for the lifetime of the resolver,
    so one instance can be shared by every processing event of a build.
    """

    def __init__(self, marker: str = DEFAULT_ROOT_MARKER):
        self.marker = marker
        self._cache: Dict[str, str] = {}

    def find_root(self, start_dir: Optional[Union[str, Path]] = None) -> str:
        current_dir = os.path.abspath(start_dir if start_dir is not None else os.getcwd())
        if current_dir in self._cache:
            return self._cache[current_dir]

        candidate = current_dir
        # The filesystem root itself is never a project root
        while candidate != os.path.dirname(candidate):
            if os.path.exists(os.path.join(candidate, self.marker)):
                logger.debug(f"Project root for {current_dir}: {candidate}")
                self._cache[current_dir] = candidate
                return candidate
            candidate = os.path.dirname(candidate)

        raise ProjectRootNotFoundError(current_dir, self.marker)

    def resolve_path(self, *paths: Union[str, Path]) -> str:
        """
        Join ``paths`` and anchor the result at the project root.

        Absolute paths are returned as is, so resolving an already resolved
        path is a no-op. Every relative path is joined onto the root, even
        when its text happens to contain the root.
        """
        root_dir = self.find_root()
        path = os.path.normpath(os.path.join(*[str(p) for p in paths]))
        if os.path.isabs(path):
            return path

        return os.path.normpath(os.path.join(root_dir, path))


def is_within(path: str, directory: str) -> bool:
    """True when ``path`` is ``directory`` itself or lies below it."""
    prefix = directory if directory.endswith(os.sep) else directory + os.sep
    return path == directory or path.startswith(prefix)


class StaticRootResolver(RootResolver):
    """A resolver with a fixed root, for hosts that already know it."""

    def __init__(self, root_dir: Union[str, Path], marker: str = DEFAULT_ROOT_MARKER):
        super().__init__(marker)
        self.root_dir = os.path.abspath(root_dir)

    def find_root(self, start_dir: Optional[Union[str, Path]] = None) -> str:
        return self.root_dir
