# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from typing import Optional
from typing import TextIO

import argparse
import itertools
import logging
import sys
from collections.abc import Iterable

import emojitable
from emojitable import logging_helpers
from emojitable.const import Group
from emojitable.exceptions import EmojiDataError
from emojitable.replace import replace_shortcodes
from emojitable.structs import Emoji

log = logging.getLogger('emojitable.cli')


def format_emoji(emoji: Emoji) -> str:
    shortcodes = ' '.join(f':{alias}:' for alias in emoji.aliases)
    skin_tone = '-'
    if emoji.skin_tone is not None:
        skin_tone = emoji.skin_tone.name.lower()
    return '\t'.join([emoji.sequence,
                      emoji.name,
                      f'E{emoji.unicode_version}',
                      emoji.group.value,
                      skin_tone,
                      shortcodes or '-'])


def _print_emojis(emojis: Iterable[Emoji],
                  limit: Optional[int],
                  out: TextIO) -> int:

    if limit is not None:
        emojis = itertools.islice(emojis, limit)

    count = 0
    for emoji in emojis:
        print(format_emoji(emoji), file=out)
        count += 1

    if not count:
        print('No emojis found', file=sys.stderr)
        return 1
    return 0


def _print_emoji(emoji: Optional[Emoji], key: str, out: TextIO) -> int:
    if emoji is None:
        print(f'Unknown emoji: {key}', file=sys.stderr)
        return 1
    print(format_emoji(emoji), file=out)
    return 0


def run_command(args: argparse.Namespace,
                out: Optional[TextIO] = None) -> int:

    if out is None:
        out = sys.stdout

    command = args.command

    if command == 'get':
        emoji = emojitable.lookup_by_sequence(args.emoji)
        return _print_emoji(emoji, args.emoji, out)

    if command == 'shortcode':
        shortcode = args.shortcode.strip(':')
        emoji = emojitable.lookup_by_shortcode(shortcode)
        return _print_emoji(emoji, args.shortcode, out)

    if command == 'search':
        return _print_emojis(emojitable.search(args.query), args.limit, out)

    if command == 'group':
        return _print_emojis(emojitable.iter_category(args.group),
                             args.limit,
                             out)

    if command == 'tones':
        emoji = emojitable.lookup_by_sequence(args.emoji)
        if emoji is None:
            return _print_emoji(emoji, args.emoji, out)
        return _print_emojis(emoji.skin_tones() or [], None, out)

    if command == 'replace':
        out.write(replace_shortcodes(sys.stdin.read()))
        return 0

    raise ValueError(f'Unknown command: {command}')


def _group(string: str) -> Group:
    try:
        return Group.from_string(string)
    except ValueError as error:
        raise argparse.ArgumentTypeError(str(error)) from None


def create_arg_parser() -> argparse.ArgumentParser:

    limit_help = 'Show at most this many emojis'

    parser = argparse.ArgumentParser(
        prog='emojitable',
        description='Look up Unicode emoji metadata')
    parser.add_argument('--loglevel',
                        default='',
                        help='Log level directives, e.g. "table=DEBUG"')
    parser.add_argument('--quiet',
                        action='store_true',
                        help='Only show critical log messages')
    parser.add_argument('--version',
                        action='version',
                        version=f'%(prog)s {emojitable.__version__}')

    subparsers = parser.add_subparsers(required=True,
                                       metavar='commands',
                                       dest='command')

    subparser = subparsers.add_parser(
        'get',
        help='Look up an emoji by its unicode sequence')
    subparser.add_argument('emoji', type=str)

    subparser = subparsers.add_parser(
        'shortcode',
        help='Look up an emoji by shortcode, e.g. "rocket"')
    subparser.add_argument('shortcode', type=str)

    subparser = subparsers.add_parser(
        'search',
        help='Search emojis by name and shortcodes')
    subparser.add_argument('query', type=str)
    subparser.add_argument('--limit', type=int, default=None,
                           help=limit_help)

    subparser = subparsers.add_parser(
        'group',
        help='List the emojis of a group')
    subparser.add_argument('group', type=_group,
                           help='e.g. "Flags" or "food_and_drink"')
    subparser.add_argument('--limit', type=int, default=None,
                           help=limit_help)

    subparser = subparsers.add_parser(
        'tones',
        help='List all skin tones of an emoji')
    subparser.add_argument('emoji', type=str)

    subparsers.add_parser(
        'replace',
        help='Replace :shortcodes: read from stdin with emojis')

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = create_arg_parser().parse_args(argv)

    logging_helpers.init()
    if args.quiet:
        logging_helpers.set_quiet()
    if args.loglevel:
        logging_helpers.set_loglevels(args.loglevel)

    try:
        return run_command(args)
    except EmojiDataError as error:
        log.critical('Unable to load emoji data: %s', error)
        return 2


if __name__ == '__main__':
    sys.exit(main())
