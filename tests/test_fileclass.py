import os
import stat
import tempfile
import unittest
from unittest import mock

from fileclass import FileClass, attributes_match, parse_st_mode
from treeutils import make_tree


class TestFileClass(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.root = self.tmp.name
        make_tree(self.root, {"a": b"same bytes", "b": b"same bytes", "c": b"other"})
        self.a = os.path.join(self.root, "a")
        self.b = os.path.join(self.root, "b")
        self.c = os.path.join(self.root, "c")

    def test_size_and_names(self):
        f = FileClass(self.a)
        self.assertTrue(f)
        self.assertEqual(int(f), 10)
        self.assertEqual(str(f), "a")
        self.assertEqual(repr(f), self.a)

    def test_unusable(self):
        f = FileClass(os.path.join(self.root, "gone"))
        self.assertFalse(f)
        self.assertEqual(int(f), 0)
        self.assertFalse(f == FileClass(self.a))

    def test_same_inode(self):
        link = os.path.join(self.root, "link")
        os.link(self.a, link)
        self.assertTrue(FileClass(self.a) == FileClass(link))
        self.assertFalse(FileClass(self.a) == FileClass(self.b))
        self.assertTrue(FileClass(self.a) != FileClass(self.c))

    def test_printable(self):
        os.chmod(self.a, 0o640)
        self.assertIn("0640", FileClass(self.a).printable)


class TestAttributesMatch(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        make_tree(self.tmp.name, {"a": b"x", "b": b"x"})
        self.a = os.path.join(self.tmp.name, "a")
        self.b = os.path.join(self.tmp.name, "b")
        os.chmod(self.a, 0o644)
        os.chmod(self.b, 0o644)

    def test_same_attributes(self):
        self.assertTrue(attributes_match(self.a, self.b))

    def test_different_mode(self):
        os.chmod(self.b, 0o600)
        self.assertFalse(attributes_match(self.a, self.b))

    def test_different_device(self):
        real_lstat = os.lstat
        def elsewhere(path):
            info = real_lstat(path)
            if path != self.b: return info
            return os.stat_result(info[:2] + (info.st_dev + 1,) + info[3:])
        with mock.patch("fileclass.os.lstat", side_effect=elsewhere):
            self.assertFalse(attributes_match(self.a, self.b))
            self.assertTrue(attributes_match(self.a, self.a))

    def test_missing_file_is_a_mismatch(self):
        missing = os.path.join(self.tmp.name, "missing")
        self.assertFalse(attributes_match(self.a, missing))
        self.assertFalse(attributes_match(missing, self.a))

    @unittest.skipUnless(os.geteuid() == 0, "changing owners requires root")
    def test_different_owner(self):
        os.chown(self.b, 12345, os.stat(self.a).st_gid)
        self.assertFalse(attributes_match(self.a, self.b))

    @unittest.skipUnless(os.geteuid() == 0, "changing groups requires root")
    def test_different_group(self):
        os.chown(self.b, os.stat(self.a).st_uid, 12345)
        self.assertFalse(attributes_match(self.a, self.b))


class TestParseStMode(unittest.TestCase):
    def test_regular_file(self):
        self.assertEqual(parse_st_mode(stat.S_IFREG | 0o644), ("f", 0o644, "0644"))

    def test_directory(self):
        self.assertEqual(parse_st_mode(stat.S_IFDIR | 0o755), ("d", 0o755, "0755"))


if __name__ == "__main__":
    unittest.main()
