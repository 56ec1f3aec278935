"""
Naming Convention Module
Renders extracted class names as declaration field names.
"""

import re
from dataclasses import dataclass
from typing import Callable, Dict, List

# Words are split on case changes, digit runs and any non-alphanumeric character.
# Ordinals ('1st', '2ND') stay one word, as in lodash's words().
WORD_PATTERN = re.compile(
    r'[A-Z]{2,}(?=[A-Z][a-z]|[^A-Za-z]|$)'
    r'|[A-Z]?[a-z]+'
    r'|\d*(?:1ST|2ND|3RD|(?![123])\dTH)(?=\b|[a-z_])'
    r'|\d*(?:1st|2nd|3rd|(?![123])\dth)(?=\b|[A-Z_])'
    r'|[A-Z]+'
    r'|\d+'
)


def split_words(value: str) -> List[str]:
    """Split an identifier such as ``myClass-name`` into ``['my', 'Class', 'name']``."""
    return WORD_PATTERN.findall(value)


def camel_case(value: str) -> str:
    words = [word.lower() for word in split_words(value)]
    if not words:
        return ''
    return words[0] + ''.join(word[:1].upper() + word[1:] for word in words[1:])


def kebab_case(value: str) -> str:
    return '-'.join(word.lower() for word in split_words(value))


@dataclass(frozen=True)
class NamingConvention:
    """
    A way of exposing class names to script code.

    ``locals_convention`` is forwarded to the host's CSS Modules settings so
    the runtime object has the same keys as the generated declaration.
    ``case`` converts the raw class name, ``quoted`` wraps the result in
    single quotes when the converted name is not a valid bare field name.
    """
    name: str
    locals_convention: str
    case: Callable[[str], str]
    quoted: bool = False

    def format(self, value: str) -> str:
        converted = self.case(value)
        if self.quoted:
            return f"'{converted}'"
        return converted


CAMEL_CASE = NamingConvention('camelCase', 'camelCaseOnly', camel_case)
KEBAB_CASE = NamingConvention('kebab-case', 'dashesOnly', kebab_case, quoted=True)

FORMATTING_OPTIONS: Dict[str, NamingConvention] = {
    CAMEL_CASE.name: CAMEL_CASE,
    KEBAB_CASE.name: KEBAB_CASE,
}

DEFAULT_FORMAT = CAMEL_CASE.name


def get_convention(name: str) -> NamingConvention:
    """Look up a naming convention by its option value."""
    try:
        return FORMATTING_OPTIONS[name]
    except KeyError:
        choices = ', '.join(FORMATTING_OPTIONS)
        raise ValueError(f"Unknown naming convention '{name}', expected one of: {choices}") from None
