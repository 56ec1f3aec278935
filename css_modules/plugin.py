"""
Typed CSS Modules Plugin
Generates a declaration file for every CSS Modules style sheet a build processes.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .declaration_emitter import DeclarationEmitter
from .naming import DEFAULT_FORMAT, NamingConvention, get_convention
from .root_resolver import RootResolver
from .selector_extractor import extract, is_eligible
from .stylesheet import StyleSheet

logger = logging.getLogger(__name__)

PLUGIN_NAME = 'vite-typed-css-modules'
POSTCSS_PLUGIN_NAME = 'postcss-typed-css-modules'


@dataclass(frozen=True)
class PluginOptions:
    root_dir: str = 'src'
    type_root_dir: Optional[str] = None
    format: str = DEFAULT_FORMAT
    hash_length: int = 6

    def __post_init__(self):
        get_convention(self.format)
        if isinstance(self.hash_length, bool) or not isinstance(self.hash_length, int) or self.hash_length < 1:
            raise ValueError(f"hash_length must be a positive integer, got {self.hash_length!r}")
        if not self.root_dir:
            raise ValueError("root_dir must not be empty")

    @property
    def convention(self) -> NamingConvention:
        return get_convention(self.format)


def scoped_name_template(hash_length: int, is_production: bool) -> str:
    """Scoped class name pattern: bare hash in production, readable name plus hash otherwise."""
    if is_production:
        return f'[hash:base64:{hash_length}]'
    return f'[local]_[hash:base64:{hash_length}]'


class TypedCssModules:
    """
    The plugin. ``process`` is the per-style-sheet hook and ``host_config``
    the settings the host build tool merges into its CSS Modules setup.
    """

    name = PLUGIN_NAME
    postcss_plugin = POSTCSS_PLUGIN_NAME

    def __init__(self,
                 options: Optional[PluginOptions] = None,
                 root_resolver: Optional[RootResolver] = None,
                 emitter: Optional[DeclarationEmitter] = None):
        self.options = options or PluginOptions()
        self.convention = self.options.convention
        self.root_resolver = root_resolver or RootResolver()
        self.emitter = emitter or DeclarationEmitter(self.root_resolver)

    def process(self, source: StyleSheet) -> Optional[str]:
        """
        Generate the declaration for one parsed style sheet.

        Returns the path written, or None when the source isn't a CSS Modules
        file or exports no class names. A declaration written by an earlier
        run is left untouched in both cases.
        """
        file_path = source.source_path
        if not is_eligible(file_path):
            logger.debug(f"Skipping {file_path}: not a CSS Modules file")
            return None

        identifiers = extract(source, self.convention)
        if not identifiers:
            logger.debug(f"Skipping {file_path}: no class selectors")
            return None

        output_path = self.emitter.resolve_output_path(
            file_path, self.options.root_dir, self.options.type_root_dir)
        self.emitter.emit(identifiers, output_path)
        return output_path

    def process_file(self, file_path: Union[str, Path]) -> Optional[str]:
        """Read, parse and process a style sheet from disk."""
        if not is_eligible(str(file_path)):
            logger.debug(f"Skipping {file_path}: not a CSS Modules file")
            return None
        return self.process(StyleSheet.parse_file(file_path))

    def __call__(self, source: StyleSheet) -> Optional[str]:
        return self.process(source)

    def host_config(self, is_production: bool) -> Dict[str, Any]:
        """Settings for the host build tool, with the build mode passed in explicitly."""
        return {
            'css': {
                'modules': {
                    'localsConvention': self.convention.locals_convention,
                    'generateScopedName': scoped_name_template(self.options.hash_length, is_production),
                },
                'postcss': {
                    'plugins': [self],
                },
            },
        }
