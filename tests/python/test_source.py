"""Unit tests for the character source."""

import io
import unittest

from lineargs.source import CharSource


class TestCharSource(unittest.TestCase):
    """Test reading and pushing back characters."""

    def test_read_until_end(self):
        """Test reading every character and then end of input."""
        source = CharSource("ab")
        self.assertEqual("a", source.read())
        self.assertEqual("b", source.read())
        self.assertEqual("", source.read())
        self.assertEqual("", source.read())

    def test_unread(self):
        """Test that an unread character is read again."""
        source = CharSource("xy")
        self.assertEqual("x", source.read())
        source.unread()
        self.assertEqual("x", source.read())
        self.assertEqual("y", source.read())

    def test_unread_only_once(self):
        """Test that only one character can be pushed back."""
        source = CharSource("xy")
        source.read()
        source.unread()
        with self.assertRaises(ValueError):
            source.unread()

    def test_unread_before_read(self):
        """Test that nothing can be pushed back before the first read."""
        with self.assertRaises(ValueError):
            CharSource("xy").unread()

    def test_unread_at_end(self):
        """Test that end of input cannot be pushed back."""
        source = CharSource("")
        self.assertEqual("", source.read())
        with self.assertRaises(ValueError):
            source.unread()

    def test_read_rest_includes_pushed_back_character(self):
        """Test that the rest of the input starts with the pushed back character."""
        source = CharSource("abc def")
        source.read()
        source.read()
        source.unread()
        self.assertEqual("bc def", source.read_rest())
        self.assertEqual("", source.read())

    def test_binary_stream_is_decoded(self):
        """Test that binary streams are read as UTF-8 text."""
        source = CharSource(io.BytesIO("ñ✓".encode("utf-8")))
        self.assertEqual("ñ", source.read())
        self.assertEqual("✓", source.read())
        self.assertEqual("", source.read())

    def test_invalid_utf8_is_replaced(self):
        """Test that invalid bytes read as U+FFFD instead of failing."""
        source = CharSource(io.BytesIO(b"a\xffb"))
        self.assertEqual("a", source.read())
        self.assertEqual("\ufffd", source.read())
        self.assertEqual("b", source.read())
        self.assertEqual("", source.read())

        self.assertEqual("x\ufffdy", CharSource(b"x\xffy").read_rest())

    def test_truncated_utf8_at_end(self):
        """Test that a truncated character at end of input reads as U+FFFD."""
        source = CharSource(io.BytesIO(b"a\xe2\x9c"))
        self.assertEqual("a", source.read())
        self.assertEqual("\ufffd", source.read())
        self.assertEqual("", source.read())

    def test_binary_stream_is_not_closed(self):
        """Test that the binary stream stays open and keeps its unread bytes."""
        stream = io.BytesIO(b"ab")
        source = CharSource(stream)
        self.assertEqual("a", source.read())
        del source

        self.assertFalse(stream.closed)
        self.assertEqual(b"b", stream.read())


if __name__ == "__main__":
    unittest.main()
