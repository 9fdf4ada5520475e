# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

# Parser for the Unicode emoji test file, see
# https://unicode.org/Public/emoji/latest/emoji-test.txt

from __future__ import annotations

import importlib.resources
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from dataclasses import field
from enum import Enum

from emojitable.const import Group
from emojitable.const import SKIN_TONE_MODIFIERS
from emojitable.const import SkinTone
from emojitable.const import UNICODE_DATA_FILE
from emojitable.const import VARIATION_SELECTOR_16
from emojitable.exceptions import EmojiDataError
from emojitable.structs import UnicodeVersion

log = logging.getLogger('emojitable.unicode_data')

GROUP_PREFIX = '# group: '
SUBGROUP_PREFIX = '# subgroup: '
COMPONENT_GROUP = 'Component'


class Status(Enum):
    FULLY_QUALIFIED = 'fully-qualified'
    MINIMALLY_QUALIFIED = 'minimally-qualified'
    UNQUALIFIED = 'unqualified'
    COMPONENT = 'component'


@dataclass
class ParsedEmoji:
    sequence: str
    name: str
    status: Status
    unicode_version: UnicodeVersion
    skin_tone: SkinTone | None = None
    variations: list[str] = field(default_factory=list)
    # Skin tone variants, only set on the default member of a family
    family: list[ParsedEmoji] = field(default_factory=list)

    @classmethod
    def from_line(cls, line: str) -> ParsedEmoji:
        '''
        Parses a line like

        1F44D 1F3FB ; fully-qualified # 👍🏻 E1.0 thumbs up: light skin tone
        '''
        code_points, sep, rest = line.partition(';')
        if not sep:
            raise ValueError('expected code points')

        status, sep, comment = rest.partition('#')
        if not sep:
            raise ValueError('expected status')

        # comment: "<emoji> E<version> <name>"
        parts = comment.strip().split(' ', 2)
        if len(parts) != 3:
            raise ValueError('expected name')
        _emoji, version, name = parts

        sequence = ''.join(chr(int(code_point, 16))
                           for code_point in code_points.split())

        return cls(sequence=sequence,
                   name=name.strip(),
                   status=Status(status.strip()),
                   unicode_version=UnicodeVersion.from_string(version))

    @property
    def modifiers(self) -> tuple[str, ...]:
        return tuple(c for c in self.sequence if c in SKIN_TONE_MODIFIERS)

    def members(self) -> list[ParsedEmoji]:
        '''
        The family in table order: default first, then by skin tone
        '''
        family = sorted(self.family, key=lambda emoji: emoji.skin_tone)
        return [self, *family]


ParsedData = dict[Group, dict[str, list[ParsedEmoji]]]


def strip_qualifiers(sequence: str) -> str:
    return sequence.replace(VARIATION_SELECTOR_16, '')


def strip_skin_tones(sequence: str) -> str:
    return ''.join(c for c in strip_qualifiers(sequence)
                   if c not in SKIN_TONE_MODIFIERS)


class _SubgroupParser:
    '''
    Collects the emojis of one subgroup. Fully-qualified emojis
    without skin tone become table entries, toned emojis are
    attached to the family of their default emoji and other
    qualifications are attached as variations.
    '''

    def __init__(self, name: str) -> None:
        self.name = name
        self.emojis: list[ParsedEmoji] = []
        self._defaults: dict[str, ParsedEmoji] = {}
        self._last_default: ParsedEmoji | None = None
        self._last_fully_qualified: ParsedEmoji | None = None

    def add(self, emoji: ParsedEmoji) -> None:
        if emoji.status == Status.COMPONENT:
            return

        if emoji.status == Status.FULLY_QUALIFIED:
            self._add_fully_qualified(emoji)
        else:
            self._add_variation(emoji)

    def _add_fully_qualified(self, emoji: ParsedEmoji) -> None:
        self._last_fully_qualified = emoji

        modifiers = emoji.modifiers
        if not modifiers:
            self.emojis.append(emoji)
            self._defaults[strip_qualifiers(emoji.sequence)] = emoji
            self._last_default = emoji
            return

        emoji.skin_tone = SkinTone.from_modifiers(modifiers)
        default = self._find_default(emoji, len(modifiers))

        if any(member.skin_tone == emoji.skin_tone
               for member in default.family):
            raise EmojiDataError(
                f'Duplicate skin tone {emoji.skin_tone.name} '
                f'for "{default.name}"')

        default.skin_tone = SkinTone.DEFAULT
        default.family.append(emoji)

    def _find_default(self, emoji: ParsedEmoji,
                      modifier_count: int) -> ParsedEmoji:
        default = self._defaults.get(strip_skin_tones(emoji.sequence))
        if default is not None:
            return default

        # Two person emojis with different skin tones are sometimes
        # spelled with other code points than their default, e.g.
        # 🫱🏻‍🫲🏼 belongs to 🤝. The default must already have toned
        # members and share the name prefix.
        default = self._last_default
        if (modifier_count == 2 and
                default is not None and
                default.family and
                emoji.name.startswith(f'{default.name}:')):
            log.debug('Using preceding default "%s" for "%s"',
                      default.name, emoji.name)
            return default

        raise EmojiDataError(
            f'No default skin tone emoji found for "{emoji.name}" '
            f'in subgroup {self.name}')

    def _add_variation(self, emoji: ParsedEmoji) -> None:
        fully_qualified = self._last_fully_qualified
        if (fully_qualified is None or
                strip_qualifiers(fully_qualified.sequence) !=
                strip_qualifiers(emoji.sequence)):
            raise EmojiDataError(
                f'No fully-qualified emoji found for {emoji.status.value} '
                f'"{emoji.name}"')

        fully_qualified.variations.append(emoji.sequence)


def parse_emoji_data(data: str) -> ParsedData:
    parsed_data: ParsedData = {}
    group: Group | None = None
    subgroup: _SubgroupParser | None = None
    skip_group = False

    for lineno, line in enumerate(data.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue

        if line.startswith(GROUP_PREFIX):
            name = line.removeprefix(GROUP_PREFIX)
            subgroup = None
            skip_group = name == COMPONENT_GROUP
            if skip_group:
                continue
            try:
                group = Group(name)
            except ValueError:
                raise EmojiDataError(
                    f'line {lineno}: unknown group "{name}"') from None
            parsed_data[group] = {}
            continue

        if line.startswith(SUBGROUP_PREFIX):
            if skip_group:
                continue
            if group is None:
                raise EmojiDataError(
                    f'line {lineno}: subgroup outside of a group')
            subgroup = _SubgroupParser(line.removeprefix(SUBGROUP_PREFIX))
            parsed_data[group][subgroup.name] = subgroup.emojis
            continue

        if line.startswith('#') or skip_group:
            continue

        if subgroup is None:
            raise EmojiDataError(f'line {lineno}: emoji outside of a subgroup')

        try:
            emoji = ParsedEmoji.from_line(line)
        except ValueError as error:
            raise EmojiDataError(
                f'line {lineno}: unable to parse "{line}": {error}') from None

        try:
            subgroup.add(emoji)
        except EmojiDataError as error:
            raise EmojiDataError(f'line {lineno}: {error}') from None

    return parsed_data


def iter_emojis(parsed_data: ParsedData) -> Iterator[tuple[Group, ParsedEmoji]]:
    '''
    Yields all fully-qualified emojis in table order, skin tone
    families are contiguous with the default first
    '''
    for group, subgroups in parsed_data.items():
        for emojis in subgroups.values():
            for emoji in emojis:
                for member in emoji.members():
                    yield group, member


def load() -> ParsedData:
    path = importlib.resources.files('emojitable') / 'data' / UNICODE_DATA_FILE
    log.debug('Loading unicode emoji data from %s', path)
    return parse_emoji_data(path.read_text(encoding='utf-8'))
