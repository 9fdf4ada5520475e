# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

import io
import logging
import unittest
from unittest.mock import patch

from emojitable import logging_helpers
from emojitable.cli import create_arg_parser
from emojitable.cli import main
from emojitable.cli import run_command
from emojitable.const import Group
from emojitable.exceptions import EmojiDataError


def _run(*argv: str) -> tuple[int, list[str]]:
    args = create_arg_parser().parse_args(argv)
    out = io.StringIO()
    with patch('sys.stderr', io.StringIO()):
        result = run_command(args, out)
    return result, out.getvalue().splitlines()


class TestCli(unittest.TestCase):

    def test_get(self) -> None:
        result, lines = _run('get', '🚀')
        self.assertEqual(result, 0)
        self.assertEqual(lines,
                         ['🚀\trocket\tE0.6\tTravel & Places\t-\t:rocket:'])

    def test_get_unknown(self) -> None:
        result, lines = _run('get', 'a')
        self.assertEqual(result, 1)
        self.assertEqual(lines, [])

    def test_shortcode(self) -> None:
        for shortcode in ('rocket', ':rocket:'):
            with self.subTest(shortcode=shortcode):
                result, lines = _run('shortcode', shortcode)
                self.assertEqual(result, 0)
                self.assertTrue(lines[0].startswith('🚀\t'))

    def test_search(self) -> None:
        result, lines = _run('search', 'star', '--limit', '3')
        self.assertEqual(result, 0)
        self.assertEqual([line.split('\t')[0] for line in lines],
                         ['⭐', '\U0001F31F', '\U0001F320'])

    def test_search_no_match(self) -> None:
        result, lines = _run('search', 'zzzzzzzzzzzzzzzz')
        self.assertEqual(result, 1)
        self.assertEqual(lines, [])

    def test_group(self) -> None:
        for name in ('Flags', 'flags', 'FLAGS'):
            with self.subTest(name=name):
                result, lines = _run('group', name, '--limit', '1')
                self.assertEqual(result, 0)
                self.assertEqual(lines[0].split('\t')[:2],
                                 ['🏁', 'chequered flag'])

    def test_group_names(self) -> None:
        parser = create_arg_parser()
        args = parser.parse_args(['group', 'food_and_drink'])
        self.assertEqual(args.group, Group.FOOD_AND_DRINK)
        args = parser.parse_args(['group', 'Food & Drink'])
        self.assertEqual(args.group, Group.FOOD_AND_DRINK)

    def test_unknown_group(self) -> None:
        with patch('sys.stderr', io.StringIO()):
            with self.assertRaises(SystemExit):
                create_arg_parser().parse_args(['group', 'Emoticons'])

    def test_tones(self) -> None:
        result, lines = _run('tones', '\U0001F64C')
        self.assertEqual(result, 0)
        self.assertEqual(len(lines), 6)
        self.assertEqual(lines[0].split('\t')[4], 'default')
        self.assertEqual(lines[1].split('\t')[4], 'light')

    def test_tones_without_skin_tones(self) -> None:
        result, _lines = _run('tones', '🚀')
        self.assertEqual(result, 1)

    def test_replace(self) -> None:
        with patch('sys.stdin', io.StringIO('launch :rocket:\n')):
            result, lines = _run('replace')
        self.assertEqual(result, 0)
        self.assertEqual(lines, ['launch 🚀'])


class TestMain(unittest.TestCase):

    def test_exit_codes(self) -> None:
        with patch('sys.stdout', io.StringIO()), \
                patch('sys.stderr', io.StringIO()):
            self.assertEqual(main(['get', '🚀']), 0)
            self.assertEqual(main(['get', 'a']), 1)

    def test_data_error(self) -> None:
        stream = io.StringIO()
        handler = logging_helpers._stream_handler
        with patch('emojitable.cli.run_command',
                   side_effect=EmojiDataError('broken')), \
                patch.object(handler, 'stream', stream):
            self.assertEqual(main(['get', '🚀']), 2)
        self.assertIn('Unable to load emoji data: broken', stream.getvalue())

    def test_quiet(self) -> None:
        logger = logging.getLogger('emojitable')
        self.addCleanup(logger.setLevel, logger.level)
        with patch('sys.stdout', io.StringIO()):
            self.assertEqual(main(['--quiet', 'get', '🚀']), 0)
        self.assertEqual(logger.level, logging.CRITICAL)

    def test_missing_command(self) -> None:
        with patch('sys.stderr', io.StringIO()):
            with self.assertRaises(SystemExit):
                main([])


if __name__ == '__main__':
    unittest.main()
