# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

'''
Lookup of Unicode emojis by sequence or shortcode

>>> rocket = lookup_by_sequence('🚀')
>>> rocket.name, rocket.shortcode
('rocket', 'rocket')
'''

from __future__ import annotations

from collections.abc import Iterator

from emojitable.const import Group
from emojitable.const import SkinTone
from emojitable.exceptions import DuplicateKeyError
from emojitable.exceptions import EmojiDataError
from emojitable.search import search
from emojitable.structs import Emoji
from emojitable.structs import SkinToneInfo
from emojitable.structs import UnicodeVersion
from emojitable.table import get_table

__version__ = '1.0.0'

__all__ = [
    'DuplicateKeyError',
    'Emoji',
    'EmojiDataError',
    'Group',
    'SkinTone',
    'SkinToneInfo',
    'UnicodeVersion',
    'get_table',
    'iter_all',
    'iter_category',
    'lookup_by_sequence',
    'lookup_by_shortcode',
    'search',
    'skin_tones',
    'with_skin_tone',
]


def lookup_by_sequence(sequence: str) -> Emoji | None:
    '''
    Returns the emoji for a unicode sequence, minimally-qualified and
    unqualified sequences return the fully-qualified emoji
    '''
    return get_table().lookup_by_sequence(sequence)


def lookup_by_shortcode(shortcode: str) -> Emoji | None:
    '''
    Returns the emoji for a shortcode like "rocket" (without colons)
    '''
    return get_table().lookup_by_shortcode(shortcode)


def iter_all() -> Iterator[Emoji]:
    return get_table().iter_all()


def iter_category(group: Group) -> Iterator[Emoji]:
    return get_table().iter_category(group)


def skin_tones(emoji: Emoji) -> Iterator[Emoji] | None:
    return emoji.skin_tones()


def with_skin_tone(emoji: Emoji, skin_tone: SkinTone) -> Emoji | None:
    return emoji.with_skin_tone(skin_tone)
