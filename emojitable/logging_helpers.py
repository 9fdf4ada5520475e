# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from typing import Optional

import logging
import os
import sys

ROOT_LOGGER = 'emojitable'
DEBUG_ENV = 'EMOJITABLE_DEBUG'


def parseLogLevel(arg: str) -> int:
    '''
    Either numeric value or level name from logging module
    '''
    if arg.isdigit():
        return int(arg)
    if arg.isupper() and hasattr(logging, arg):
        return getattr(logging, arg)
    print('%s is not a valid loglevel' % repr(arg), file=sys.stderr)
    return 0


def parseLogTarget(arg: str) -> str:
    '''
    [emojitable.]x.y  ->  emojitable.x.y
    .other_logger     ->  other_logger
    <None>            ->  emojitable
    '''
    arg = arg.lower()
    if not arg:
        return ROOT_LOGGER
    if arg.startswith('.'):
        return arg[1:]
    if arg.startswith(ROOT_LOGGER):
        return arg
    return f'{ROOT_LOGGER}.{arg}'


def parseAndSetLogLevels(arg: str) -> None:
    '''
    [=]LOGLEVEL          ->  emojitable=LOGLEVEL
    emojitable=LOGLEVEL  ->  emojitable=LOGLEVEL
    .other=10            ->  other=10
    .=10                 ->  <nothing>
    table=search=20      ->  emojitable.table=20
                             emojitable.search=20
    emojitable=10,table=20 -> emojitable=10
                              emojitable.table=20
    '''
    for directive in arg.split(','):
        directive = directive.strip()
        if not directive:
            continue
        if '=' not in directive:
            directive = '=' + directive
        targets, level = directive.rsplit('=', 1)
        level = parseLogLevel(level.strip())
        for target in targets.split('='):
            target = parseLogTarget(target.strip())
            if target:
                logging.getLogger(target).setLevel(level)


class Colors:
    NONE = chr(27) + '[0m'
    BLUE = chr(27) + '[34m'
    GREEN = chr(27) + '[32m'
    BROWN = chr(27) + '[33m'
    RED = chr(27) + '[31m'
    BRIGHT_RED = chr(27) + '[31;1m'
    CYAN = chr(27) + '[36m'


def colorize(text: str, color: str) -> str:
    return color + text + Colors.NONE


class FancyFormatter(logging.Formatter):
    '''
    An eye-candy formatter with Colors
    '''
    colors_mapping = {
        'DEBUG': Colors.BLUE,
        'INFO': Colors.GREEN,
        'WARNING': Colors.BROWN,
        'ERROR': Colors.RED,
        'CRITICAL': Colors.BRIGHT_RED,
    }

    def __init__(self,
                 fmt: Optional[str] = None,
                 datefmt: Optional[str] = None,
                 use_color: bool = False) -> None:
        logging.Formatter.__init__(self, fmt, datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname
        record.levelname = '(%s)' % level[0]

        if self.use_color:
            c = FancyFormatter.colors_mapping.get(level, '')
            record.levelname = colorize(record.levelname, c)
            record.name = '%-25s' % colorize(record.name, Colors.CYAN)
        else:
            record.name = '%-25s|' % record.name

        return logging.Formatter.format(self, record)


def init() -> None:
    '''
    Initialize the logging system
    '''
    if _stream_handler in logging.getLogger(ROOT_LOGGER).handlers:
        return

    use_color = False
    if os.name != 'nt':
        use_color = sys.stderr.isatty()

    _stream_handler.setFormatter(
        FancyFormatter(
            '%(asctime)s %(levelname)s %(name)-35s %(message)s',
            '%x %H:%M:%S',
            use_color
        )
    )

    root_log = logging.getLogger(ROOT_LOGGER)
    root_log.setLevel(logging.WARNING)
    root_log.addHandler(_stream_handler)
    root_log.propagate = False

    if os.environ.get(DEBUG_ENV, False):
        set_verbose()


def set_loglevels(loglevels_string: str) -> None:
    parseAndSetLogLevels(loglevels_string)


def set_verbose() -> None:
    parseAndSetLogLevels('emojitable=DEBUG')


def set_quiet() -> None:
    parseAndSetLogLevels('emojitable=CRITICAL')


_stream_handler = logging.StreamHandler()
