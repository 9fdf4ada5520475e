# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Iterator

from rapidfuzz.distance import Jaro

from emojitable.const import PREFIX_BOOST
from emojitable.const import SEARCH_THRESHOLD
from emojitable.structs import Emoji
from emojitable.table import get_table

log = logging.getLogger('emojitable.search')


def similarity(query: str, candidate: str) -> float:
    '''
    Jaro similarity of query and candidate, boosted if the
    candidate starts with the query
    '''
    score = Jaro.normalized_similarity(query, candidate)
    if candidate.startswith(query):
        score *= PREFIX_BOOST
    return score


def score_emoji(query: str, emoji: Emoji) -> float:
    return max(similarity(query, candidate)
               for candidate in (emoji.name, *emoji.aliases))


def search(query: str,
           emojis: Iterable[Emoji] | None = None) -> Iterator[Emoji]:
    '''
    Returns all emojis whose name or one of its shortcodes is similar
    to the query, best matches first. Emojis with the same score are
    returned in table order.
    '''
    if emojis is None:
        emojis = get_table()

    scored: list[tuple[float, int, Emoji]] = []
    for emoji in emojis:
        score = score_emoji(query, emoji)
        if score > SEARCH_THRESHOLD:
            scored.append((-score, emoji.index, emoji))

    scored.sort(key=lambda item: (item[0], item[1]))
    log.debug('Search for %r matched %s emojis', query, len(scored))
    return iter([emoji for _score, _index, emoji in scored])
