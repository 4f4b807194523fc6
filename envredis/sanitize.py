"""POSIX environment variable name handling.

See: http://pubs.opengroup.org/onlinepubs/9699919799/basedefs/V1_chap08.html
"""

import re

# A leading digit, or any character outside the portable name set.
_INVALID = re.compile(r'^[0-9]|[^A-Z0-9_]')
_POSIX_NAME = re.compile(r'[A-Z_][A-Z0-9_]*')


def sanitize(name: str) -> str:
    """
    Transform an environment variable name to follow the POSIX standard.

    The name is uppercased, then every invalid character (and a leading
    digit) is replaced with an underscore. Never raises, and applying it
    twice gives the same result as applying it once.

    Examples:
        >>> sanitize('bad name')
        'BAD_NAME'
        >>> sanitize('9lives')
        '_LIVES'
        >>> sanitize('')
        ''
    """
    return _INVALID.sub('_', name.upper())


def is_posix_name(name: str) -> bool:
    """Return True if name is already a valid POSIX variable name."""
    return _POSIX_NAME.fullmatch(name) is not None
