"""Functions for turning user-supplied text into course codes, patterns, and path segments."""

import re
from typing import Pattern

COURSE_CODE_REGEX = r'[A-Z]+[0-9]+'

COURSE_DIR_REGEX = r'^(\S*[A-Z]+[0-9]+\S*)\s(.+)'

RESERVED_CHARS = '"<>|\0:*?\\/'

_RESERVED_TABLE = str.maketrans({c: '_' for c in RESERVED_CHARS})


def sanitize(raw: str) -> str:
    """Makes text safe to use as a single file or folder name.

    Each of the characters ``" < > | : * ? \\ /`` and NUL is replaced with an underscore, then trailing periods are
    removed. For example, ``'What is 1/2?...'`` becomes ``'What is 1_2_'``.

    The result may be empty, e.g. for ``'...'``.
    """
    return raw.translate(_RESERVED_TABLE).rstrip('.')


def is_valid_course_code(code: str) -> bool:
    """Returns True if the (already uppercased) code contains letters immediately followed by digits.

    This only needs to match somewhere in the string, so ``'CS101A'`` and ``'XCS101Y'`` are accepted.
    """
    try:
        return re.search(COURSE_CODE_REGEX, code) is not None
    except re.error:
        return False


def course_dir_pattern(code: str) -> Pattern:
    """Returns a pattern matching folder names that start with the code, whitespace, and some description.

    The code is not escaped. May raise :exc:`re.error`.
    """
    return re.compile(rf'^({code})\s.+')
