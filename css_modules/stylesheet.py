"""
Style Sheet Module
Parses CSS with tinycss2 into a rule tree that can be walked rule by rule.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Union
import tinycss2
from tinycss2.ast import QualifiedRule

from utils.file_utils import read_file_content

logger = logging.getLogger(__name__)

# At-rules whose block holds style rules
GROUPING_AT_RULES = {'media', 'supports', 'layer', 'container', 'document', 'scope', 'starting-style'}

class StyleSheet:
    """A parsed style sheet together with the path it was read from."""

    def __init__(self, nodes: List, source_path: Optional[str] = None):
        self.nodes = nodes
        self.source_path = source_path

    @classmethod
    def parse(cls, css_content: str, source_path: Optional[str] = None) -> 'StyleSheet':
        nodes = tinycss2.parse_stylesheet(css_content, skip_comments=True, skip_whitespace=True)
        return cls(nodes, source_path)

    @classmethod
    def parse_file(cls, file_path: Union[str, Path]) -> 'StyleSheet':
        content = read_file_content(Path(file_path))
        logger.debug(f"Read {file_path}, content length: {len(content)}")
        return cls.parse(content, str(file_path))

    def iter_rules(self) -> Iterator[QualifiedRule]:
        """Yield every style rule, parents before the rules nested inside them."""
        yield from self._iter_rules(self.nodes)

    def _iter_rules(self, nodes: Iterable) -> Iterator[QualifiedRule]:
        for node in nodes:
            if node.type == 'qualified-rule':
                yield node
                # Nested style rules (CSS nesting)
                children = tinycss2.parse_blocks_contents(node.content, skip_comments=True, skip_whitespace=True)
                yield from self._iter_rules(children)
            elif node.type == 'at-rule' and node.content is not None:
                if node.lower_at_keyword in GROUPING_AT_RULES:
                    children = tinycss2.parse_rule_list(node.content, skip_comments=True, skip_whitespace=True)
                    yield from self._iter_rules(children)
                # @keyframes steps, @font-face and friends hold no selectors
            elif node.type == 'error':
                logger.debug(f"Skipping unparsable CSS in {self.source_path} at line {node.source_line}: {node.message}")

    def walk_rules(self, visitor: Callable[[QualifiedRule], None]) -> None:
        for rule in self.iter_rules():
            visitor(rule)

    @staticmethod
    def selectors_of(rule: QualifiedRule) -> List[str]:
        """
        Split a rule's prelude into its comma separated selectors.

        Commas inside functional pseudo-classes (``:is(.a, .b)``) or attribute
        selectors belong to a nested block token and do not split the list.
        """
        selectors = []
        current = []
        for token in rule.prelude:
            if token.type == 'literal' and token.value == ',':
                selectors.append(current)
                current = []
            else:
                current.append(token)
        selectors.append(current)
        serialized = (tinycss2.serialize(tokens).strip() for tokens in selectors)
        return [selector for selector in serialized if selector]
