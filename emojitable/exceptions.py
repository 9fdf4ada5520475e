# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only


class EmojiDataError(Exception):
    '''
    The bundled emoji data violates an invariant of the table,
    the table can not be built
    '''

    def __init__(self, text: str = '') -> None:
        Exception.__init__(self)
        self.text = text

    def __str__(self) -> str:
        return self.text


class DuplicateKeyError(EmojiDataError):
    '''
    A lookup key is registered for two different table positions
    '''

    def __init__(self, kind: str, key: str, first: int, second: int) -> None:
        EmojiDataError.__init__(
            self,
            f'{kind} key {key!r} maps to position {first} and {second}')
        self.kind = kind
        self.key = key
        self.first = first
        self.second = second
