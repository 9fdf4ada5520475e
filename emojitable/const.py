# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from typing import TYPE_CHECKING

from collections.abc import Iterator
from enum import Enum
from enum import IntEnum
from enum import unique
from itertools import permutations

from emojitable.exceptions import EmojiDataError

if TYPE_CHECKING:
    from emojitable.structs import Emoji

UNICODE_DATA_FILE = 'emoji-test.txt'
GITHUB_DATA_FILE = 'gemoji.json'

# Fuzzy search tuning
SEARCH_THRESHOLD = 0.8
PREFIX_BOOST = 2.0

VARIATION_SELECTOR_16 = '\uFE0F'

SKIN_TONE_MODIFIERS = (
    '\U0001F3FB',
    '\U0001F3FC',
    '\U0001F3FD',
    '\U0001F3FE',
    '\U0001F3FF',
)


@unique
class Group(Enum):
    '''
    A category for an emoji, based on Unicode CLDR data.
    The "Component" group is not part of the table.
    '''

    SMILEYS_AND_EMOTION = 'Smileys & Emotion'
    PEOPLE_AND_BODY = 'People & Body'
    ANIMALS_AND_NATURE = 'Animals & Nature'
    FOOD_AND_DRINK = 'Food & Drink'
    TRAVEL_AND_PLACES = 'Travel & Places'
    ACTIVITIES = 'Activities'
    OBJECTS = 'Objects'
    SYMBOLS = 'Symbols'
    FLAGS = 'Flags'

    @classmethod
    def iter(cls) -> Iterator[Group]:
        return iter(cls)

    @classmethod
    def from_string(cls, string: str) -> Group:
        '''
        Accepts the CLDR name ("Food & Drink") or the member
        name in any case ("food_and_drink")
        '''
        try:
            return cls(string)
        except ValueError:
            pass

        try:
            return cls[string.upper().replace('-', '_')]
        except KeyError:
            raise ValueError(f'Unknown emoji group: {string}') from None

    def emojis(self) -> Iterator[Emoji]:
        from emojitable.table import get_table
        return get_table().iter_category(self)


@unique
class SkinTone(IntEnum):
    DEFAULT = 0
    LIGHT = 1
    MEDIUM_LIGHT = 2
    MEDIUM = 3
    MEDIUM_DARK = 4
    DARK = 5
    LIGHT_AND_MEDIUM_LIGHT = 6
    LIGHT_AND_MEDIUM = 7
    LIGHT_AND_MEDIUM_DARK = 8
    LIGHT_AND_DARK = 9
    MEDIUM_LIGHT_AND_LIGHT = 10
    MEDIUM_LIGHT_AND_MEDIUM = 11
    MEDIUM_LIGHT_AND_MEDIUM_DARK = 12
    MEDIUM_LIGHT_AND_DARK = 13
    MEDIUM_AND_LIGHT = 14
    MEDIUM_AND_MEDIUM_LIGHT = 15
    MEDIUM_AND_MEDIUM_DARK = 16
    MEDIUM_AND_DARK = 17
    MEDIUM_DARK_AND_LIGHT = 18
    MEDIUM_DARK_AND_MEDIUM_LIGHT = 19
    MEDIUM_DARK_AND_MEDIUM = 20
    MEDIUM_DARK_AND_DARK = 21
    DARK_AND_LIGHT = 22
    DARK_AND_MEDIUM_LIGHT = 23
    DARK_AND_MEDIUM = 24
    DARK_AND_MEDIUM_DARK = 25

    @classmethod
    def from_modifiers(cls, modifiers: tuple[str, ...]) -> SkinTone:
        try:
            return _MODIFIER_COMBINATIONS[modifiers]
        except KeyError:
            codepoints = ' '.join(f'U+{ord(m):04X}' for m in modifiers)
            raise EmojiDataError(
                f'Unrecognized skin tone combination: {codepoints}') from None

    @property
    def is_combination(self) -> bool:
        return self > SkinTone.DARK


def _build_modifier_combinations() -> dict[tuple[str, ...], SkinTone]:
    singles = list(SkinTone)[1:6]
    combinations: dict[tuple[str, ...], SkinTone] = {}
    for modifier, tone in zip(SKIN_TONE_MODIFIERS, singles):
        combinations[(modifier,)] = tone
        combinations[(modifier, modifier)] = tone

    # Ordered pairs of distinct tones follow the singles in enum order
    pairs = permutations(SKIN_TONE_MODIFIERS, 2)
    for pair, tone in zip(pairs, list(SkinTone)[6:]):
        combinations[pair] = tone
    return combinations


_MODIFIER_COMBINATIONS = _build_modifier_combinations()
