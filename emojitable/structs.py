# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from typing import Any
from typing import NamedTuple
from typing import TYPE_CHECKING

from collections.abc import Iterator
from dataclasses import dataclass
from dataclasses import field
from functools import total_ordering

from emojitable.const import Group
from emojitable.const import SkinTone

if TYPE_CHECKING:
    from emojitable.table import EmojiTable


class UnicodeVersion(NamedTuple):
    major: int
    minor: int

    @classmethod
    def from_string(cls, string: str) -> UnicodeVersion:
        '''
        Parses "E13.1" or "13.1"
        '''
        major, minor = string.lstrip('E').split('.', 1)
        return cls(int(major), int(minor))

    def __str__(self) -> str:
        return f'{self.major}.{self.minor}'


class SkinToneInfo(NamedTuple):
    base_index: int
    family_size: int
    tone: SkinTone


@total_ordering
@dataclass(frozen=True, eq=False)
class Emoji:
    '''
    A single emoji of the table, see
    https://unicode.org/emoji/charts/full-emoji-list.html

    An emoji compares equal to the string of its fully-qualified
    sequence, and emojis are ordered by their position in the table.
    '''

    index: int
    sequence: str
    name: str
    unicode_version: UnicodeVersion
    group: Group
    skin_tone_info: SkinToneInfo | None = None
    aliases: tuple[str, ...] = ()
    _table: EmojiTable | None = field(default=None, repr=False)

    @property
    def utf8(self) -> bytes:
        return self.sequence.encode('utf-8')

    @property
    def skin_tone(self) -> SkinTone | None:
        if self.skin_tone_info is None:
            return None
        return self.skin_tone_info.tone

    @property
    def shortcode(self) -> str | None:
        if not self.aliases:
            return None
        return self.aliases[0]

    def shortcodes(self) -> Iterator[str]:
        return iter(self.aliases)

    def skin_tones(self) -> Iterator[Emoji] | None:
        '''
        Returns all members of this emoji's skin tone family, the
        default tone first, or None if the emoji has no skin tones
        '''
        if self.skin_tone_info is None:
            return None

        table = self._table
        if table is None:
            raise ValueError(f'Emoji {self.name!r} is not part of a table')

        base_index, family_size, _tone = self.skin_tone_info
        return (table[i] for i in range(base_index, base_index + family_size))

    def with_skin_tone(self, skin_tone: SkinTone) -> Emoji | None:
        emojis = self.skin_tones()
        if emojis is None:
            return None

        for emoji in emojis:
            if emoji.skin_tone == skin_tone:
                return emoji
        return None

    def __str__(self) -> str:
        return self.sequence

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Emoji):
            return (self.index == other.index and
                    self.sequence == other.sequence)
        if isinstance(other, str):
            return self.sequence == other
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Emoji):
            return NotImplemented
        return self.index < other.index

    def __hash__(self) -> int:
        return hash(self.sequence)
