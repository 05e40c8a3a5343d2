#
# Copyright (c), 2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import re
from typing import Any

###
# Name validation helpers

NCNAME_PATTERN = re.compile(r'^[^\d\W][\w.\-\u00B7\u0300-\u036F\u203F\u2040]*$')
WHITESPACES_PATTERN = re.compile(r'[^\S\xa0]+')  # include ASCII 160 (non-breaking space)


def is_ncname(value: Any) -> bool:
    return isinstance(value, str) and NCNAME_PATTERN.match(value) is not None


def collapse_white_spaces(s: str) -> str:
    return WHITESPACES_PATTERN.sub(' ', s).strip(' ')


def shorten(s: str, max_length: int = 60) -> str:
    """Returns a one-line version of *s*, truncated to *max_length* characters."""
    s = collapse_white_spaces(s)
    if len(s) <= max_length:
        return s
    return s[:max_length - 3] + '...'
