import errno
import os
import unittest

from seekio.lib.commands import ReadHex, ReadText, SeekAbsolute, WriteLiteral
from seekio.lib.errors import IoError, ParseError, ShortWriteError, UsageError
from seekio.lib.interpreter import Interpreter, render_hex, render_text


class MemorySession:
    """In-memory stand-in for FileSession."""

    def __init__(self, data: bytes = b""):
        self.buffer = bytearray(data)
        self.cursor = 0

    def read(self, length: int) -> bytes:
        data = bytes(self.buffer[self.cursor : self.cursor + length])
        self.cursor += len(data)
        return data

    def write(self, data: bytes) -> int:
        if self.cursor > len(self.buffer):
            self.buffer.extend(b"\x00" * (self.cursor - len(self.buffer)))
        self.buffer[self.cursor : self.cursor + len(data)] = data
        self.cursor += len(data)
        return len(data)

    def seek(self, offset: int) -> int:
        if offset < 0:
            raise IoError("lseek", "<memory>", OSError(errno.EINVAL, os.strerror(errno.EINVAL)))
        self.cursor = offset
        return offset


class TestRender(unittest.TestCase):
    def test_text(self):
        self.assertEqual(render_text(b"hello"), "hello")
        self.assertEqual(render_text(b"\x00\x1f\x7f\x80\xffA ~"), "?????A ~")

    def test_hex_every_byte(self):
        rendered = render_hex(bytes(range(256))).split(" ")
        self.assertEqual(len(rendered), 256)
        for value, text in enumerate(rendered):
            self.assertEqual(text, f"{value:02x}")
            self.assertEqual(len(text), 2)
            self.assertEqual(text, text.lower())


class TestExecute(unittest.TestCase):
    def setUp(self):
        self.session = MemorySession()
        self.interp = Interpreter(self.session, emit=lambda _line: None)

    def test_write_advances_cursor(self):
        line = self.interp.execute(WriteLiteral("whello", b"hello"))
        self.assertEqual(line, "whello: wrote 5 bytes")
        self.assertEqual(self.session.cursor, 5)

    def test_read_at_eof(self):
        self.assertEqual(self.interp.execute(ReadText("r5", 5)), "r5: end-of-file")
        self.assertEqual(self.session.cursor, 0)

    def test_read_zero_length(self):
        self.session.buffer[:] = b"abc"
        self.assertEqual(self.interp.execute(ReadText("r0", 0)), "r0: end-of-file")

    def test_short_read_returns_remaining(self):
        self.session.buffer[:] = b"abcdef"
        self.session.cursor = 4
        self.assertEqual(self.interp.execute(ReadText("r100", 100)), "r100: ef")
        self.assertEqual(self.session.cursor, 6)
        self.assertEqual(self.interp.execute(ReadText("r1", 1)), "r1: end-of-file")

    def test_read_hex(self):
        self.session.buffer[:] = b"\x00\xabZ"
        self.assertEqual(self.interp.execute(ReadHex("R3", 3)), "R3: 00 ab 5a")

    def test_seek_sets_cursor(self):
        self.assertEqual(self.interp.execute(SeekAbsolute("s100", 100)), "s100: seek succeeded")
        self.assertEqual(self.session.cursor, 100)

    def test_seek_write_seek_read_round_trip(self):
        self.interp.execute(SeekAbsolute("s7", 7))
        self.interp.execute(WriteLiteral("wround", b"round"))
        self.interp.execute(SeekAbsolute("s7", 7))
        self.assertEqual(self.interp.execute(ReadText("r5", 5)), "r5: round")
        self.assertEqual(self.session.buffer[:7], b"\x00" * 7)

    def test_seek_failure_propagates(self):
        with self.assertRaises(IoError):
            self.interp.execute(SeekAbsolute("s-1", -1))

    def test_unknown_command_type(self):
        with self.assertRaises(TypeError):
            self.interp.execute("r5")


class TestRun(unittest.TestCase):
    def setUp(self):
        self.session = MemorySession()
        self.lines = []
        self.interp = Interpreter(self.session, emit=self.lines.append)

    def test_example_scenario(self):
        count = self.interp.run(["whello", "s0", "r5"])

        self.assertEqual(count, 3)
        self.assertEqual(self.lines, ["whello: wrote 5 bytes", "s0: seek succeeded", "r5: hello"])

    def test_cursor_carries_between_commands(self):
        self.interp.run(["wabcdef", "s2", "r2", "r2"])
        self.assertEqual(self.lines[-2:], ["r2: cd", "r2: ef"])
        self.assertEqual(self.session.cursor, 6)

    def test_parse_error_stops_run(self):
        with self.assertRaises(ParseError):
            self.interp.run(["whello", "r12x", "s0"])

        self.assertEqual(self.lines, ["whello: wrote 5 bytes"])
        self.assertEqual(bytes(self.session.buffer), b"hello")

    def test_unknown_prefix_stops_run(self):
        with self.assertRaises(UsageError) as cm:
            self.interp.run(["q5", "wnever"])

        self.assertIn("q5", str(cm.exception))
        self.assertEqual(self.lines, [])
        self.assertEqual(bytes(self.session.buffer), b"")

    def test_short_write_stops_run(self):
        def short_write(data):
            self.session.cursor += 1
            raise ShortWriteError("write", "<memory>", 1, len(data))

        self.session.write = short_write
        with self.assertRaises(ShortWriteError):
            self.interp.run(["wabc", "s0"])

        self.assertEqual(self.lines, [])

    def test_default_emit_is_print(self):
        self.assertIs(Interpreter(self.session).emit, print)
