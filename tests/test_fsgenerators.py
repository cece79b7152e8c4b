import os
import tempfile
import unittest

import fsgenerators
from fileclass import FileClass
from hrerrors import TraversalError
from treeutils import make_tree


class TestAllFilesIn(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.root = self.tmp.name

    def path(self, *parts):
        return os.path.join(self.root, *parts)

    def test_walks_recursively_in_name_order(self):
        make_tree(self.root, {
            "b": b"1",
            "a/z": b"2",
            "a/y/x": b"3",
            "c": b"4",
        })
        found = list(fsgenerators.all_files_in(self.root))
        self.assertEqual(found, [
            self.path("a", "y", "x"),
            self.path("a", "z"),
            self.path("b"),
            self.path("c"),
        ])

    def test_symlinks_are_skipped(self):
        make_tree(self.root, {"real/file": b"content"})
        os.symlink(self.path("real", "file"), self.path("linked_file"))
        os.symlink(self.path("real"), self.path("linked_dir"))
        found = list(fsgenerators.all_files_in(self.root))
        self.assertEqual(found, [self.path("real", "file")])

    def test_missing_root_raises_without_handler(self):
        with self.assertRaises(TraversalError):
            list(fsgenerators.all_files_in(self.path("missing")))

    def test_missing_root_reported_to_handler(self):
        errors = []
        found = list(fsgenerators.all_files_in(self.path("missing"), errors.append))
        self.assertEqual(found, [])
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].path, self.path("missing"))

    def test_root_that_is_a_file(self):
        make_tree(self.root, {"plain": b"x"})
        errors = []
        self.assertEqual(list(fsgenerators.all_files_in(self.path("plain"), errors.append)), [])
        self.assertIsInstance(errors[0].error, NotADirectoryError)

    @unittest.skipIf(os.geteuid() == 0, "root can read any directory")
    def test_unreadable_subtree_is_skipped(self):
        make_tree(self.root, {"a/hidden": b"1", "b/visible": b"2", "c": b"3"})
        os.chmod(self.path("a"), 0)
        self.addCleanup(os.chmod, self.path("a"), 0o755)
        errors = []
        found = list(fsgenerators.all_files_in(self.root, errors.append))
        self.assertEqual(found, [self.path("b", "visible"), self.path("c")])
        self.assertEqual([e.path for e in errors], [self.path("a")])


class TestFilesAndStats(unittest.TestCase):
    def test_yields_fileclass_with_size(self):
        with tempfile.TemporaryDirectory() as root:
            make_tree(root, {"ten": b"0123456789", "empty": b""})
            found = {str(f): f for f in fsgenerators.files_and_stats(root)}
            self.assertEqual(set(found), {"ten", "empty"})
            self.assertIsInstance(found["ten"], FileClass)
            self.assertEqual(int(found["ten"]), 10)
            self.assertEqual(int(found["empty"]), 0)
            self.assertTrue(found["ten"].is_regular)


if __name__ == "__main__":
    unittest.main()
