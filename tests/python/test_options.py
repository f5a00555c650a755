"""Unit tests for splitting options from positional arguments."""

import unittest

from lineargs.options import ParsedArgs, parse_args, split_args


class TestParseArgs(unittest.TestCase):
    """Test parsing lines into options and arguments."""

    def test_options_and_arguments(self):
        """Test options before "--" and arguments after it."""
        parsed = parse_args("-l --number=42 -where=here -- -not-an-option- one two three")

        self.assertEqual({"l": "", "number": "42", "where": "here"}, parsed.options)
        self.assertEqual(["-not-an-option-", "one", "two", "three"], parsed.arguments)

    def test_symbol_argument(self):
        """Test that a pipe symbol ends up as a single argument."""
        parsed = parse_args(
            "-l --number=42 -where=here -- -not-an-option- one two three |pipers piping"
        )

        self.assertEqual({"l": "", "number": "42", "where": "here"}, parsed.options)
        self.assertEqual(
            ["-not-an-option-", "one", "two", "three", "|pipers piping"],
            parsed.arguments,
        )

    def test_options_stop_at_first_argument(self):
        """Test that option-like tokens after an argument are arguments."""
        parsed = parse_args("-v file -x --y=2")

        self.assertEqual({"v": ""}, parsed.options)
        self.assertEqual(["file", "-x", "--y=2"], parsed.arguments)

    def test_only_first_double_dash_is_dropped(self):
        """Test that a second "--" is kept as an argument."""
        parsed = parse_args("-a -- -- b")

        self.assertEqual({"a": ""}, parsed.options)
        self.assertEqual(["--", "b"], parsed.arguments)

    def test_value_with_equals_and_quotes(self):
        """Test that only the first "=" splits key and value."""
        parsed = parse_args("--filter=a=b --msg='hello world'")

        self.assertEqual({"filter": "a=b", "msg": "hello world"}, parsed.options)
        self.assertEqual([], parsed.arguments)

    def test_last_option_wins(self):
        """Test that a repeated option keeps the last value."""
        parsed = parse_args("-n=1 --n=2 ---n")

        self.assertEqual({"n": ""}, parsed.options)

    def test_empty_line(self):
        """Test that an empty line has no options and no arguments."""
        parsed = parse_args("   ")

        self.assertEqual({}, parsed.options)
        self.assertEqual([], parsed.arguments)

    def test_split_args_does_not_modify_tokens(self):
        """Test splitting an existing token list."""
        tokens = ["-a", "b"]
        parsed = split_args(tokens)

        self.assertEqual(["-a", "b"], tokens)
        self.assertEqual(ParsedArgs(options={"a": ""}, arguments=["b"]), parsed)


class TestOptionAccessors(unittest.TestCase):
    """Test reading option values."""

    def setUp(self):
        self.parsed = parse_args("-l --number=42 --name=x --bad=4x2")

    def test_get_option(self):
        """Test string options with defaults."""
        self.assertEqual("x", self.parsed.get_option("name", "default"))
        self.assertEqual("", self.parsed.get_option("l", "default"))
        self.assertEqual("default", self.parsed.get_option("missing", "default"))
        self.assertEqual("", self.parsed.get_option("missing"))

    def test_get_int_option(self):
        """Test integer options with defaults."""
        self.assertEqual(42, self.parsed.get_int_option("number", 7))
        self.assertEqual(7, self.parsed.get_int_option("missing", 7))
        self.assertEqual(0, self.parsed.get_int_option("missing"))

    def test_get_int_option_not_a_number(self):
        """Test that a non-numeric value returns the default."""
        self.assertEqual(7, self.parsed.get_int_option("bad", 7))
        self.assertEqual(7, self.parsed.get_int_option("l", 7))
        self.assertEqual(-1, self.parsed.get_int_option("name", -1))

    def test_get_int_option_is_strict(self):
        """Test that only an optional sign and ASCII digits are accepted."""
        parsed = parse_args(
            "--under=1_000 --space=' 5' --arabic=\u0663 --plus=+5 --minus=-12"
        )

        self.assertEqual(7, parsed.get_int_option("under", 7))
        self.assertEqual(7, parsed.get_int_option("space", 7))
        self.assertEqual(7, parsed.get_int_option("arabic", 7))
        self.assertEqual(5, parsed.get_int_option("plus", 7))
        self.assertEqual(-12, parsed.get_int_option("minus", 7))


if __name__ == "__main__":
    unittest.main()
