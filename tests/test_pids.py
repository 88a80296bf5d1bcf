import tempfile
import unittest
from pathlib import Path

from getjpg.pids import read_pids


class TestReadPids(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "pids.txt"

    def tearDown(self):
        self.tmp.cleanup()

    def write(self, data: bytes):
        self.path.write_bytes(data)
        return str(self.path)

    def test_lines_in_order(self):
        path = self.write(b"bdr:3\nbdr:1\nbdr:2\n")
        self.assertEqual(read_pids(path), ["bdr:3", "bdr:1", "bdr:2"])

    def test_no_trailing_newline(self):
        path = self.write(b"a\nb")
        self.assertEqual(read_pids(path), ["a", "b"])

    def test_empty_lines_and_duplicates_kept(self):
        path = self.write(b"a\n\na\n")
        self.assertEqual(read_pids(path), ["a", "", "a"])

    def test_crlf_terminators(self):
        path = self.write(b"a\r\nb\r\n")
        self.assertEqual(read_pids(path), ["a", "b"])

    def test_whitespace_kept(self):
        path = self.write(b" a \n")
        self.assertEqual(read_pids(path), [" a "])

    def test_bom_is_dropped(self):
        path = self.write(b"\xef\xbb\xbfbdr:1\nbdr:2\n")
        self.assertEqual(read_pids(path), ["bdr:1", "bdr:2"])

    def test_undecodable_bytes_pass_through(self):
        path = self.write(b"bdr:\xff1\nbdr:2\n")
        pids = read_pids(path)
        self.assertEqual(len(pids), 2)
        self.assertEqual(pids[0].encode("utf-8", "surrogateescape"), b"bdr:\xff1")
        self.assertEqual(pids[1], "bdr:2")

    def test_empty_file(self):
        path = self.write(b"")
        self.assertEqual(read_pids(path), [])

    def test_missing_file(self):
        with self.assertRaises(OSError):
            read_pids(str(self.path))


if __name__ == '__main__':
    unittest.main()
