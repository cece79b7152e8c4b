import hashlib
import os
import tempfile
import unittest

from fileclass import FileClass
from hrerrors import HashError
from sizebuckets import UNHASHED, DuplicateGroup
from treeutils import make_tree, quiet_context


def digest(data):
    return hashlib.sha256(data).hexdigest()


class TestLazyHashing(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.root = self.tmp.name
        self.context = quiet_context()
        self.buckets = self.context.buckets

    def add(self, name, data=None):
        path = os.path.join(self.root, name)
        if data is not None:
            make_tree(self.root, {name: data})
        self.buckets << FileClass(path)
        return path

    def test_unique_sizes_are_never_hashed(self):
        a = self.add("a", b"1")
        b = self.add("b", b"22")
        c = self.add("c", b"333")
        self.assertEqual(self.context.hasher.calls, [])
        self.assertEqual(self.buckets.hash_count, 0)
        self.assertEqual(self.buckets[1], {UNHASHED: [a]})
        self.assertEqual(self.buckets[2], {UNHASHED: [b]})
        self.assertEqual(self.buckets[3], {UNHASHED: [c]})
        self.assertEqual(self.buckets.unhashed, 3)
        self.assertEqual(list(self.buckets.groups()), [])

    def test_second_file_hashes_both(self):
        a = self.add("a", b"same")
        self.assertEqual(self.context.hasher.calls, [])
        b = self.add("b", b"same")
        self.assertEqual(self.context.hasher.calls, [a, b])
        self.assertEqual(self.buckets[4], {digest(b"same"): [a, b]})

    def test_third_file_is_hashed_on_arrival(self):
        a = self.add("a", b"same")
        b = self.add("b", b"same")
        c = self.add("c", b"diff")
        self.assertEqual(self.context.hasher.calls, [a, b, c])
        self.assertEqual(self.buckets[4], {digest(b"same"): [a, b], digest(b"diff"): [c]})

    def test_every_file_hashed_at_most_once(self):
        paths = [self.add(f"f{i}", b"abcdef") for i in range(6)]
        self.assertEqual(sorted(self.context.hasher.calls), sorted(paths))
        self.assertEqual(self.buckets.hash_count, 6)

    def test_empty_files_are_ignored(self):
        self.add("e1", b"")
        self.add("e2", b"")
        self.assertEqual(dict(self.buckets), {})
        self.assertEqual(self.context.hasher.calls, [])

    def test_same_file_twice_is_ignored(self):
        a = self.add("a", b"content")
        self.assertFalse(self.buckets.add(FileClass(a)))
        self.assertFalse(self.buckets.add(FileClass(os.path.join(self.root, ".", "a"))))
        self.assertEqual(self.buckets[7], {UNHASHED: [a]})
        self.assertEqual(self.context.hasher.calls, [])

    def test_unreadable_first_file(self):
        a = self.add("a", b"12345")
        os.unlink(a)
        make_tree(self.root, {"b": b"54321"})
        b = os.path.join(self.root, "b")
        with self.assertRaises(HashError) as cm:
            self.buckets << FileClass(b)
        self.assertEqual(cm.exception.path, a)
        # b takes a's place, and still has not been hashed.
        self.assertEqual(self.buckets[5], {UNHASHED: [b]})
        c = self.add("c", b"54321")
        self.assertEqual(self.buckets[5], {digest(b"54321"): [b, c]})

    def test_unreadable_current_file(self):
        a = self.add("a", b"12345")
        make_tree(self.root, {"b": b"12345"})
        b = os.path.join(self.root, "b")
        f = FileClass(b)
        os.unlink(b)
        with self.assertRaises(HashError) as cm:
            self.buckets << f
        self.assertEqual(cm.exception.path, b)
        self.assertEqual(self.buckets[5], {digest(b"12345"): [a]})


class TestGroups(unittest.TestCase):
    def test_groups_in_size_then_digest_order(self):
        with tempfile.TemporaryDirectory() as root:
            files = {
                "big1": b"xxxxxxxxxx", "big2": b"xxxxxxxxxx", "big3": b"yyyyyyyyyy",
                "small1": b"abc", "small2": b"abc",
                "lonely": b"only one of this size",
            }
            make_tree(root, files)
            context = quiet_context()
            for name in sorted(files):
                context.buckets << FileClass(os.path.join(root, name))

            p = lambda n: os.path.join(root, n)
            xs, ys = digest(b"xxxxxxxxxx"), digest(b"yyyyyyyyyy")
            big = sorted([DuplicateGroup(xs, 10, (p("big1"), p("big2"))),
                          DuplicateGroup(ys, 10, (p("big3"),))])
            expected = [DuplicateGroup(digest(b"abc"), 3, (p("small1"), p("small2")))] + big
            self.assertEqual(list(context.buckets.groups()), expected)

            dups = list(context.buckets.duplicates())
            self.assertEqual([g.size for g in dups], [3, 10])
            self.assertEqual(dups[1].base, p("big1"))
            self.assertEqual(dups[1].duplicates, (p("big2"),))
            for g in dups:
                sizes = {os.path.getsize(f) for f in g.paths}
                self.assertEqual(sizes, {g.size})


if __name__ == "__main__":
    unittest.main()
