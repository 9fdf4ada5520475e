# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

import unittest

from sample_data import SAMPLE_GITHUB_DATA

from emojitable.exceptions import EmojiDataError
from emojitable.github_data import parse_emoji_data


class TestGithubData(unittest.TestCase):

    def test_parse(self) -> None:
        data = parse_emoji_data(SAMPLE_GITHUB_DATA)
        self.assertEqual(data['\U0001F64C'], ['raised_hands', 'praise'])
        self.assertEqual(data['☹'], ['frowning_face'])
        self.assertEqual(len(data), 4)

    def test_merge_duplicate_entries(self) -> None:
        data = parse_emoji_data('''[
            {"emoji": "a", "aliases": ["one"]},
            {"emoji": "b", "aliases": ["two"]},
            {"emoji": "a", "aliases": ["three", "four"]}
        ]''')
        self.assertEqual(data, {'a': ['one', 'three', 'four'], 'b': ['two']})

    def test_skip_entries_without_aliases(self) -> None:
        data = parse_emoji_data('[{"emoji": "a", "aliases": []}]')
        self.assertEqual(data, {})

    def test_invalid_json(self) -> None:
        with self.assertRaises(EmojiDataError) as context:
            parse_emoji_data('[{"emoji": ')
        self.assertIn('Invalid shortcode data', str(context.exception))

    def test_invalid_entry(self) -> None:
        for data in ('[{"aliases": ["one"]}]',
                     '[{"emoji": "a"}]',
                     '["a"]'):
            with self.subTest(data=data):
                with self.assertRaises(EmojiDataError):
                    parse_emoji_data(data)


if __name__ == '__main__':
    unittest.main()
