"""
Selector Extractor Module
Finds the class names a CSS Modules style sheet exports.
"""

import logging
import re
from typing import Dict, List, Optional

from .naming import NamingConvention
from .stylesheet import StyleSheet

logger = logging.getLogger(__name__)

MODULE_SUFFIX = '.module.css'
CLASS_MARKER = '.'

# Only class tokens are exported; id, element, attribute, pseudo and universal parts never match
CLASS_PATTERN = re.compile(r'\.[\w-]+', re.ASCII)

MODULE_FILE_PATTERN = re.compile(re.escape(MODULE_SUFFIX) + r'$')
# A query string, or Vue re-parsing the <style module> block of a .vue file
VIRTUAL_MODULE_PATTERN = re.compile(r'\?|&vue')

# Attribute selector bodies and quoted strings can contain dots ("[href$='.pdf']")
_MASKED_PARTS = re.compile(r'\[[^\]]*\]|"(?:[^"\\]|\\.)*"|\'(?:[^\'\\]|\\.)*\'')


def is_eligible(file_path: Optional[str]) -> bool:
    """Check whether a source path names a CSS Modules file that should get a declaration."""
    if not file_path:
        return False

    if not MODULE_FILE_PATTERN.search(file_path):
        return False

    return not VIRTUAL_MODULE_PATTERN.search(file_path)


def get_selector_classes(selector: Optional[str]) -> List[str]:
    """Return every class token of one selector, marker included, left to right."""
    if not selector:
        return []
    scannable = _MASKED_PARTS.sub(lambda match: ' ' * len(match.group(0)), selector)
    return CLASS_PATTERN.findall(scannable)


def extract(source: StyleSheet, convention: NamingConvention) -> List[str]:
    """
    Collect the exported identifiers of a parsed style sheet.

    Every selector of every rule is scanned for class tokens. The marker is
    stripped, the naming convention applied and the result added to an
    ordered set, so the first rule mentioning a class decides its position.
    An empty list means there is nothing to declare.
    """
    identifiers: Dict[str, None] = {}

    def visit(rule):
        for selector in source.selectors_of(rule):
            for class_name in get_selector_classes(selector):
                bare = class_name[len(CLASS_MARKER):]
                if not convention.case(bare):
                    # e.g. '.-' has no word characters left to render
                    logger.debug(f"Ignoring class '{class_name}' in {source.source_path}: empty after conversion")
                    continue
                identifiers.setdefault(convention.format(bare), None)

    source.walk_rules(visit)
    return list(identifiers)
