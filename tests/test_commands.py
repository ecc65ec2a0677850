import unittest

from seekio.lib.commands import ReadHex, ReadText, SeekAbsolute, WriteLiteral, parse_command
from seekio.lib.errors import ParseError, ParseFailure, UsageError


class TestParseCommand(unittest.TestCase):
    def test_read_text(self):
        self.assertEqual(parse_command("r5"), ReadText("r5", 5))

    def test_read_hex_any_base(self):
        self.assertEqual(parse_command("R0x10"), ReadHex("R0x10", 16))
        self.assertEqual(parse_command("R010"), ReadHex("R010", 8))

    def test_write_literal(self):
        self.assertEqual(parse_command("whello"), WriteLiteral("whello", b"hello"))
        self.assertEqual(parse_command("w"), WriteLiteral("w", b""))
        self.assertEqual(parse_command("w12x"), WriteLiteral("w12x", b"12x"))

    def test_write_literal_keeps_raw_argv_bytes(self):
        # Undecodable argv bytes arrive as lone surrogates
        self.assertEqual(parse_command("w\udcff").data, b"\xff")

    def test_seek(self):
        self.assertEqual(parse_command("s100"), SeekAbsolute("s100", 100))
        self.assertEqual(parse_command("s-1"), SeekAbsolute("s-1", -1))

    def test_prefix_is_case_sensitive(self):
        with self.assertRaises(UsageError):
            parse_command("S0")
        with self.assertRaises(UsageError):
            parse_command("W0")

    def test_unknown_prefix(self):
        with self.assertRaises(UsageError) as cm:
            parse_command("q5")
        self.assertEqual(str(cm.exception), "Argument must start with [rRws]: q5")

    def test_empty_token(self):
        with self.assertRaises(UsageError):
            parse_command("")

    def test_malformed_length(self):
        with self.assertRaises(ParseError) as cm:
            parse_command("r12x")
        self.assertEqual(cm.exception.reason, ParseFailure.TRAILING_GARBAGE)
        self.assertEqual(cm.exception.name, "r12x")

    def test_missing_length(self):
        with self.assertRaises(ParseError) as cm:
            parse_command("r")
        self.assertEqual(cm.exception.reason, ParseFailure.NOT_A_NUMBER)

    def test_negative_length(self):
        with self.assertRaises(ParseError) as cm:
            parse_command("R-1")
        self.assertEqual(cm.exception.reason, ParseFailure.NEGATIVE)

    def test_offset_out_of_range(self):
        with self.assertRaises(ParseError) as cm:
            parse_command("s99999999999999999999")
        self.assertEqual(cm.exception.reason, ParseFailure.OUT_OF_RANGE)
