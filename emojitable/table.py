# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from typing import overload

import itertools
import logging
import threading
from collections.abc import Iterator
from collections.abc import Sequence

from emojitable import github_data
from emojitable import unicode_data
from emojitable.const import Group
from emojitable.const import SkinTone
from emojitable.exceptions import DuplicateKeyError
from emojitable.exceptions import EmojiDataError
from emojitable.structs import Emoji
from emojitable.structs import SkinToneInfo

log = logging.getLogger('emojitable.table')

EXPECTED_FAMILY_SIZES = (6, 26)


class EmojiTable(Sequence[Emoji]):
    '''
    The ordered, immutable list of all fully-qualified emojis together
    with the maps from unicode sequences and shortcodes to positions
    '''

    def __init__(self,
                 unicode_emojis: unicode_data.ParsedData,
                 github_emojis: github_data.ParsedData) -> None:

        self._emojis: list[Emoji] = []
        self._unicode_map: dict[str, int] = {}
        self._shortcode_map: dict[str, int] = {}

        entries = list(unicode_data.iter_emojis(unicode_emojis))
        for index, (_group, parsed) in enumerate(entries):
            self._register(self._unicode_map, 'unicode', parsed.sequence, index)
            for variation in parsed.variations:
                self._register(self._unicode_map, 'unicode', variation, index)

        aliases = self._resolve_aliases(github_emojis)

        family_start = 0
        family_size = 0
        for index, (group, parsed) in enumerate(entries):
            skin_tone_info = None
            if parsed.skin_tone is not None:
                if parsed.skin_tone == SkinTone.DEFAULT:
                    family_start = index
                    family_size = len(parsed.family) + 1
                    self._check_family(parsed)
                skin_tone_info = SkinToneInfo(family_start,
                                              family_size,
                                              parsed.skin_tone)

            self._emojis.append(Emoji(index=index,
                                      sequence=parsed.sequence,
                                      name=parsed.name,
                                      unicode_version=parsed.unicode_version,
                                      group=group,
                                      skin_tone_info=skin_tone_info,
                                      aliases=tuple(aliases.get(index, ())),
                                      _table=self))

        log.info('Built emoji table with %s emojis, %s unicode keys '
                 'and %s shortcodes', len(self._emojis),
                 len(self._unicode_map), len(self._shortcode_map))

    @staticmethod
    def _check_family(default: unicode_data.ParsedEmoji) -> None:
        tones = [member.skin_tone for member in default.members()]
        if len(tones) not in EXPECTED_FAMILY_SIZES:
            raise EmojiDataError(
                f'Skin tone family of "{default.name}" has {len(tones)} '
                f'members, expected one of {EXPECTED_FAMILY_SIZES}')

        if tones != list(SkinTone)[:len(tones)]:
            raise EmojiDataError(
                f'Skin tone family of "{default.name}" is incomplete')

    @staticmethod
    def _register(mapping: dict[str, int],
                  kind: str,
                  key: str,
                  index: int) -> None:

        current = mapping.setdefault(key, index)
        if current != index:
            raise DuplicateKeyError(kind, key, current, index)

    def _resolve_aliases(self,
                         github_emojis: github_data.ParsedData
                         ) -> dict[int, list[str]]:

        aliases: dict[int, list[str]] = {}
        for emoji, shortcodes in github_emojis.items():
            index = self._unicode_map.get(emoji)
            if index is None:
                log.debug('Skipping shortcodes %s, %r is not in the table',
                          shortcodes, emoji)
                continue

            for shortcode in shortcodes:
                self._register(self._shortcode_map, 'shortcode',
                               shortcode, index)
                aliases.setdefault(index, [])
                if shortcode not in aliases[index]:
                    aliases[index].append(shortcode)
        return aliases

    @overload
    def __getitem__(self, index: int) -> Emoji:
        ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Emoji]:
        ...

    def __getitem__(self, index: int | slice) -> Emoji | Sequence[Emoji]:
        return self._emojis[index]

    def __len__(self) -> int:
        return len(self._emojis)

    def __iter__(self) -> Iterator[Emoji]:
        return iter(self._emojis)

    def resolve_unicode(self, sequence: str) -> int | None:
        return self._unicode_map.get(sequence)

    def resolve_shortcode(self, shortcode: str) -> int | None:
        return self._shortcode_map.get(shortcode)

    def lookup_by_sequence(self, sequence: str) -> Emoji | None:
        index = self.resolve_unicode(sequence)
        if index is None:
            return None
        return self._emojis[index]

    def lookup_by_shortcode(self, shortcode: str) -> Emoji | None:
        index = self.resolve_shortcode(shortcode)
        if index is None:
            return None
        return self._emojis[index]

    def iter_all(self) -> Iterator[Emoji]:
        '''
        Iterates over all emojis with the default skin tone or
        without skin tones, in table order
        '''
        return (emoji for emoji in self._emojis
                if emoji.skin_tone in (None, SkinTone.DEFAULT))

    def iter_category(self, group: Group) -> Iterator[Emoji]:
        emojis = itertools.dropwhile(lambda emoji: emoji.group != group,
                                     self.iter_all())
        return itertools.takewhile(lambda emoji: emoji.group == group, emojis)


_table: EmojiTable | None = None
_table_lock = threading.Lock()


def get_table() -> EmojiTable:
    '''
    Returns the process wide emoji table, it is built from the bundled
    data on first use
    '''
    global _table
    if _table is not None:
        return _table

    with _table_lock:
        if _table is None:
            _table = EmojiTable(unicode_data.load(), github_data.load())
    return _table
