# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from typing import Callable
from typing import Optional

from emojitable.structs import Emoji
from emojitable.table import get_table

Resolver = Callable[[str], Optional[Emoji]]


def replace_shortcodes(text: str, resolver: Resolver | None = None) -> str:
    '''
    Replaces occurrences of :shortcode: with the emoji, unknown
    shortcodes are left untouched

    >>> replace_shortcodes('launch :rocket:')
    'launch 🚀'
    '''
    if resolver is None:
        resolver = get_table().lookup_by_shortcode

    result: list[str] = []
    while True:
        start = text.find(':')
        if start == -1:
            break
        end = text.find(':', start + 1)
        if end == -1:
            break

        emoji = resolver(text[start + 1:end])
        if emoji is None:
            # The closing colon may open the next shortcode
            result.append(text[:end])
            text = text[end:]
            continue

        result.append(text[:start])
        result.append(emoji.sequence)
        text = text[end + 1:]

    result.append(text)
    return ''.join(result)
