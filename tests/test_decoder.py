"""Tests for zsh_history_to_fish/decoder.py"""

import unittest

from zsh_history_to_fish.decoder import META, decode


class TestDecodePlainBytes(unittest.TestCase):
    """Bytes without a META marker pass through unchanged."""

    def test_ascii_unchanged(self):
        self.assertEqual(decode(b"echo hello world"), "echo hello world")

    def test_empty(self):
        self.assertEqual(decode(b""), "")

    def test_valid_utf8_unchanged(self):
        text = "echo héllo ✓"
        self.assertEqual(decode(text.encode("utf-8")), text)

    def test_newline_kept(self):
        self.assertEqual(decode(b"ls\n"), "ls\n")


class TestDecodeMeta(unittest.TestCase):
    """META marks the next byte as having bit 5 flipped."""

    def test_marker_toggles_next_byte(self):
        self.assertEqual(decode(bytes([META, 0x41])), "a")

    def test_marker_alone_is_dropped(self):
        self.assertEqual(decode(bytes([META])), "")

    def test_trailing_marker_is_dropped(self):
        self.assertEqual(decode(b"ls" + bytes([META])), "ls")

    def test_only_next_byte_is_toggled(self):
        self.assertEqual(decode(bytes([META, 0x41, 0x41])), "aA")

    def test_repeated_marker_rearms(self):
        # a repeated META re-arms, nothing is emitted
        self.assertEqual(decode(bytes([META, META])), "")

    def test_repeated_marker_toggles_following_byte(self):
        self.assertEqual(decode(bytes([META, META, 0x41])), "a")

    def test_metafied_japanese(self):
        # "あ" is e3 81 82 in UTF-8
        metafied = bytes([0xE3, META, 0xA1, META, 0xA2])
        self.assertEqual(decode(metafied), "あ")

    def test_metafied_command(self):
        # "echo ア" -> ア is e3 82 a2
        metafied = b"echo " + bytes([0xE3, META, 0xA2, 0xA2])
        self.assertEqual(decode(metafied), "echo ア")


class TestDecodeInvalidUtf8(unittest.TestCase):
    """Invalid UTF-8 after unescaping is replaced, never raised."""

    def test_lone_continuation_byte(self):
        self.assertEqual(decode(b"a\x80b"), "a\ufffdb")

    def test_truncated_sequence(self):
        self.assertEqual(decode(b"echo \xe3\x81"), "echo \ufffd")

    def test_same_input_same_output(self):
        data = bytes([0xE3, META, 0xA1, 0xFF])
        self.assertEqual(decode(data), decode(data))


if __name__ == "__main__":
    unittest.main()
