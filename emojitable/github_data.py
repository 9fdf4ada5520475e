# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

# Parser for shortcode databases in the format of GitHub's gemoji, see
# https://github.com/github/gemoji/blob/master/db/emoji.json

from __future__ import annotations

from typing import Any

import importlib.resources
import json
import logging

from emojitable.const import GITHUB_DATA_FILE
from emojitable.exceptions import EmojiDataError

log = logging.getLogger('emojitable.github_data')

# emoji -> aliases, the first alias is the canonical shortcode
ParsedData = dict[str, list[str]]


def parse_emoji_data(data: str) -> ParsedData:
    try:
        entries: list[dict[str, Any]] = json.loads(data)
    except ValueError as error:
        raise EmojiDataError(f'Invalid shortcode data: {error}') from None

    parsed_data: ParsedData = {}
    for entry in entries:
        try:
            emoji = entry['emoji']
            aliases = entry['aliases']
        except (KeyError, TypeError):
            raise EmojiDataError(
                f'Invalid shortcode entry: {entry!r}') from None

        if not aliases:
            continue

        if emoji in parsed_data:
            log.debug('Merging aliases %s into %s', aliases, emoji)
            parsed_data[emoji].extend(aliases)
        else:
            parsed_data[emoji] = list(aliases)

    return parsed_data


def load() -> ParsedData:
    path = importlib.resources.files('emojitable') / 'data' / GITHUB_DATA_FILE
    log.debug('Loading shortcode data from %s', path)
    return parse_emoji_data(path.read_text(encoding='utf-8'))
