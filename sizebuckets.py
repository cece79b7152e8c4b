# -*- coding: utf-8 -*-
"""
The hash map. Files are dropped into buckets by size, and a file is
only hashed once we know there is at least one other file of the
same size. Most files on most file systems have a size that no other
file shares, and those files are never read at all.

    size -> { digest -> [path, path, ...] }

The first file of a given size is parked under UNHASHED. When the
second one arrives, the first one is hashed and moved to its real
key, and from then on every newcomer is hashed on arrival.
"""
import typing
from   typing import *

###
# Standard imports, starting with os and sys
###
min_py = (3, 11)
import os
import sys
if sys.version_info < min_py:
    print(f"This program requires Python {min_py[0]}.{min_py[1]}, or higher.")
    sys.exit(os.EX_SOFTWARE)

###
# Other standard distro imports
###
import collections
from   collections.abc import Iterator

###
# imports and objects that were written for this project.
###
from   fileclass import FileClass
from   hrerrors import HashError

###
# Credits
###
__author__ = 'hrdups authors'
__copyright__ = 'Copyright 2025'
__credits__ = None
__version__ = 0.3
__maintainer__ = 'hrdups authors'
__email__ = None
__status__ = 'in progress'
__license__ = 'MIT'

UNHASHED = None


class DuplicateGroup(NamedTuple):
    """
    Files with the same size and the same digest. paths[0] is the
    base; the others are the candidates for linking or removal.
    """
    digest: str
    size: int
    paths: tuple

    @property
    def base(self) -> str:
        return self.paths[0]

    @property
    def duplicates(self) -> tuple:
        return self.paths[1:]


class SizeBuckets: pass
class SizeBuckets(collections.defaultdict):
    """
    A defaultdict keyed on size. Files are added with the << operator
    (or add()), which is where the lazy hashing happens.

        buckets = SizeBuckets(context)
        for f in fsgenerators.files_and_stats(d):
            buckets << f
    """

    def __init__(self, context:object) -> None:
        collections.defaultdict.__init__(self, dict)
        self.context = context
        self.seen = set()
        self.hash_count = 0


    def __lshift__(self, f:FileClass) -> SizeBuckets:
        self.add(f)
        return self


    def _digest(self, path:str) -> str:
        self.context.hashing(path)
        try:
            digest = self.context.hasher.hash_file(path)
        except HashError:
            self.context.hashed(path, None)
            raise
        self.hash_count += 1
        self.context.hashed(path, digest)
        return digest


    def add(self, f:FileClass) -> bool:
        """
        Put f in its bucket, hashing whatever needs to be hashed.

        returns -- True if f is now in the map; False if it was
            ignored because it is empty or we have already seen it.

        raises -- HashError if a file could not be read. The map is
            put back in order before the error leaves: a deferred
            first file that cannot be read is dropped and f takes its
            place; if f itself cannot be read, f is left out.
        """
        size = int(f)
        if not size: return False

        # The same file may be named twice if the roots overlap.
        # It must never become a duplicate of itself.
        key = os.path.abspath(f.name)
        if key in self.seen: return False

        bucket = self[size]
        if not bucket:
            bucket[UNHASHED] = [f.name]
            self.seen.add(key)
            return True

        if UNHASHED in bucket:
            first = bucket.pop(UNHASHED)
            try:
                first_digest = self._digest(first[0])
            except HashError:
                bucket[UNHASHED] = [f.name]
                self.seen.add(key)
                raise
            bucket.setdefault(first_digest, []).extend(first)

        digest = self._digest(f.name)
        bucket.setdefault(digest, []).append(f.name)
        self.seen.add(key)
        return True


    def groups(self) -> Iterator[DuplicateGroup]:
        """
        Every finished group, in order of size and then digest,
        including those with only one member.
        """
        for size in sorted(self):
            bucket = self[size]
            for digest in sorted(k for k in bucket if k is not UNHASHED):
                yield DuplicateGroup(digest, size, tuple(bucket[digest]))


    def duplicates(self) -> Iterator[DuplicateGroup]:
        """
        Only the groups that have something to reclaim.
        """
        yield from ( g for g in self.groups() if len(g.paths) > 1 )


    @property
    def unhashed(self) -> int:
        """
        The number of buckets that never needed a hash.
        """
        return sum(1 for bucket in self.values() if UNHASHED in bucket)
