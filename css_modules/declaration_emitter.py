"""
Declaration Emitter Module
Renders and writes the TypeScript declaration that accompanies a CSS Modules file.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from utils.file_utils import ensure_directory, write_file_atomic
from .root_resolver import RootResolver, is_within

logger = logging.getLogger(__name__)

DECLARATION_SUFFIX = '.d.ts'
TEMPLATE_DIR = Path(__file__).parent / 'templates'
DECLARATION_TEMPLATE = 'declaration.d.ts.j2'


class DeclarationEmitter:
    def __init__(self, root_resolver: Optional[RootResolver] = None):
        self.root_resolver = root_resolver or RootResolver()
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            trim_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.template = self.env.get_template(DECLARATION_TEMPLATE)

    def resolve_output_path(self, source_path: str, root_dir: str, type_root_dir: Optional[str] = None) -> str:
        """
        Compute where the declaration for ``source_path`` is written.

        Without ``type_root_dir`` the declaration sits next to its source.
        Otherwise the source's location below ``root_dir`` is mirrored under
        ``type_root_dir``; both directories are resolved against the project
        root, which raises ProjectRootNotFoundError when there is none.
        """
        if not type_root_dir:
            return source_path + DECLARATION_SUFFIX

        resolved_source = self.root_resolver.resolve_path(source_path)
        resolved_root = self.root_resolver.resolve_path(root_dir)
        project_root = self.root_resolver.find_root()
        if is_within(resolved_source, resolved_root):
            relative = resolved_source[len(resolved_root):]
        elif is_within(resolved_source, project_root):
            # Outside root_dir: keep the location relative to the project
            relative = resolved_source[len(project_root):]
        else:
            relative = os.path.splitdrive(resolved_source)[1]
        # A leading separator would make the join below discard type_root_dir
        relative = relative.lstrip('/\\')

        type_file_path = os.path.join(self.root_resolver.resolve_path(type_root_dir), relative)
        return os.path.normpath(type_file_path) + DECLARATION_SUFFIX

    def render(self, identifiers: List[str]) -> str:
        """Render the declaration body, one read-only field per identifier in the given order."""
        return self.template.render(keys=identifiers)

    def emit(self, identifiers: List[str], output_path: Union[str, Path]) -> None:
        """
        Write the declaration to ``output_path``, replacing any previous content.

        Raises:
            OSError: If the directory can't be created or the file can't be written
        """
        output_path = Path(output_path)
        data = self.render(identifiers)
        try:
            ensure_directory(output_path.parent)
            write_file_atomic(output_path, data)
        except OSError as e:
            logger.error(f"Error writing declaration {output_path}: {str(e)}", exc_info=True)
            raise
        logger.info(f"Wrote {len(identifiers)} class names to {output_path}")
