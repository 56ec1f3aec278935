#!/usr/bin/env python3
"""
Typed CSS Modules
Command line entry point: writes TypeScript declarations for CSS Modules files.

Usage:
    python main.py generate
    python main.py generate --root-dir src --type-root-dir types --format kebab-case
    python main.py generate src/components/button.module.css
    python main.py config --hash-length 8 --production
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from css_modules.naming import DEFAULT_FORMAT, FORMATTING_OPTIONS
from css_modules.plugin import PluginOptions, TypedCssModules
from css_modules.root_resolver import DEFAULT_ROOT_MARKER, ProjectRootNotFoundError, RootResolver, StaticRootResolver
from css_modules.selector_extractor import MODULE_SUFFIX
from utils.file_utils import get_all_files_by_suffix

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate TypeScript declarations for CSS Modules style sheets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python main.py generate --root-dir src\n"
            "  python main.py generate --type-root-dir types --format kebab-case\n"
            "  python main.py config --production\n"
        )
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Log debug output, including skipped files."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Write declarations for CSS Modules files.")
    generate.add_argument(
        "paths",
        nargs="*",
        help=f"Style sheets to process. Default: every {MODULE_SUFFIX} file below --root-dir."
    )
    generate.add_argument(
        "--root-dir",
        default="src",
        help="Source directory, relative to the project root. Default: src"
    )
    generate.add_argument(
        "--type-root-dir",
        default=None,
        help="Write declarations below this directory instead of next to each style sheet."
    )
    generate.add_argument(
        "--format",
        choices=list(FORMATTING_OPTIONS),
        default=DEFAULT_FORMAT,
        help=f"Naming convention for the declared class names. Default: {DEFAULT_FORMAT}"
    )
    generate.add_argument(
        "--marker",
        default=DEFAULT_ROOT_MARKER,
        help=f"File that marks the project root. Default: {DEFAULT_ROOT_MARKER}"
    )
    generate.add_argument(
        "--project-root",
        default=None,
        help="Use this directory as the project root instead of searching for --marker."
    )

    config = subparsers.add_parser("config", help="Print the CSS Modules settings for the host build tool.")
    config.add_argument("--format", choices=list(FORMATTING_OPTIONS), default=DEFAULT_FORMAT)
    config.add_argument("--hash-length", type=int, default=6)
    config.add_argument(
        "--production",
        action="store_true",
        default=False,
        help="Use the production scoped name pattern (hash only)."
    )

    return parser.parse_args(argv)


def run_generate(args: argparse.Namespace) -> int:
    if args.project_root:
        root_resolver = StaticRootResolver(args.project_root, args.marker)
    else:
        root_resolver = RootResolver(args.marker)

    plugin = TypedCssModules(
        PluginOptions(root_dir=args.root_dir, type_root_dir=args.type_root_dir, format=args.format),
        root_resolver=root_resolver,
    )

    # Relative paths are given from the working directory, not the project root
    paths = [os.path.abspath(path) for path in args.paths]
    if not paths:
        source_dir = root_resolver.resolve_path(args.root_dir)
        paths = [str(p) for p in get_all_files_by_suffix(source_dir, MODULE_SUFFIX)]
        logger.info(f"Found {len(paths)} {MODULE_SUFFIX} files in {source_dir}")

    failures = 0
    for path in paths:
        try:
            output_path = plugin.process_file(path)
        except OSError as e:
            logger.error(f"Failed to process {path}: {e}")
            failures += 1
            continue
        if output_path:
            print(output_path)

    return 1 if failures else 0


def run_config(args: argparse.Namespace) -> int:
    plugin = TypedCssModules(PluginOptions(format=args.format, hash_length=args.hash_length))
    config = plugin.host_config(is_production=args.production)
    print(json.dumps(config, indent=2, default=lambda o: getattr(o, 'postcss_plugin', str(o))))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        if args.command == "generate":
            return run_generate(args)
        return run_config(args)
    except ProjectRootNotFoundError as e:
        logger.error(f"Configuration error: {e}")
        return 2
    except ValueError as e:
        logger.error(f"Invalid option: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
