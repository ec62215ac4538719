"""
Tests for file-name sanitising, file helpers and timestamp parsing.
"""

import tempfile
import unittest
from datetime import datetime, timezone
from pathlib import Path

from besrest.utils.files import sanitize_txt, save_text
from besrest.utils.timestamps import parse_bes_modtime


class TestSanitizeTxt(unittest.TestCase):
    def test_slashes_become_dashes_colon_dropped(self):
        self.assertEqual(sanitize_txt("a/b\\c:d"), ["a-b-cd"])

    def test_allowed_punctuation_kept(self):
        self.assertEqual(sanitize_txt("Fix (v1.2) my_file - x"), ["Fix (v1.2) my_file - x"])

    def test_disallowed_characters_removed(self):
        self.assertEqual(sanitize_txt('what?*<>|"name'), ["whatname"])

    def test_non_ascii_letters_removed(self):
        self.assertEqual(sanitize_txt("café"), ["caf"])

    def test_order_and_count_preserved(self):
        result = sanitize_txt("custom/Site", "Fixlet", "101", "")
        self.assertEqual(result, ["custom-Site", "Fixlet", "101", ""])

    def test_non_string_input_converted(self):
        self.assertEqual(sanitize_txt(42), ["42"])

    def test_no_input(self):
        self.assertEqual(sanitize_txt(), [])


class TestSaveText(unittest.TestCase):
    def test_creates_parents_and_writes_utf8_without_bom(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "a" / "b" / "item.bes"
            save_text(target, "<BES>é</BES>\r\n")
            data = target.read_bytes()
        self.assertFalse(data.startswith(b"\xef\xbb\xbf"))
        self.assertEqual(data, "<BES>é</BES>\r\n".encode("utf-8"))

    def test_overwrites_existing_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "item.bes"
            save_text(target, "first version that is longer")
            save_text(target, "second")
            self.assertEqual(target.read_text(encoding="utf-8"), "second")


class TestParseBesModtime(unittest.TestCase):
    def test_rfc2822_stamp(self):
        result = parse_bes_modtime("Tue, 05 Mar 2024 18:23:44 +0000")
        self.assertEqual(result, datetime(2024, 3, 5, 18, 23, 44, tzinfo=timezone.utc))

    def test_missing(self):
        self.assertIsNone(parse_bes_modtime(None))
        self.assertIsNone(parse_bes_modtime(""))

    def test_malformed(self):
        self.assertIsNone(parse_bes_modtime("last tuesday"))


if __name__ == "__main__":
    unittest.main()
