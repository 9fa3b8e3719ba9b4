"""
PATTERN HELPERS - Compilation shared by the rule tables

Rule patterns are written with '.' for "any character", but a gap such as
'verify.{0,20}account' must not bridge a line break. '.' is compiled to a
class that excludes every line terminator (\\n, \\r, U+2028, U+2029).
"""

import re

LINE_CHAR = r'[^\n\r\u2028\u2029]'

_UNESCAPED_DOT = re.compile(r'(?<!\\)\.')


def compile_pattern(pattern: str) -> re.Pattern:
    """Compile a case-insensitive rule pattern with line-bound '.'"""
    return re.compile(_UNESCAPED_DOT.sub(lambda _: LINE_CHAR, pattern), re.IGNORECASE)
