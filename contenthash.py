# -*- coding: utf-8 -*-
"""
Convenience class to hash the contents of a file with whichever
algorithm the user asked for. SHA-256 is the default because two
files with the same digest are treated as the same file, and we
are about to delete one of them.
"""
import typing
from   typing import *

min_py = (3, 11)

###
# Standard imports, starting with os and sys
###
from   io import DEFAULT_BUFFER_SIZE
import os
import sys
if sys.version_info < min_py:
    print(f"This program requires Python {min_py[0]}.{min_py[1]}, or higher.")
    sys.exit(os.EX_SOFTWARE)

###
# Other standard distro imports
###
import hashlib

###
# Installed libraries.
###
import xxhash

###
# imports and objects that are a part of this project
###
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

###
# xxh128 is not a cryptographic hash. It is here for people
# who have a lot of data, trust it, and are in a hurry.
###
ALGORITHMS = {
    'sha256' : hashlib.sha256,
    'sha512' : hashlib.sha512,
    'blake2b' : hashlib.blake2b,
    'xxh128' : xxhash.xxh3_128
    }

DEFAULT_ALGORITHM = 'sha256'


class Hash:
    """
    One Hash object can be used for any number of files; each call
    to hash_file() starts a fresh digest. The read buffer is allocated
    once, so memory use does not depend on the size of the files.
    """

    BUFSIZE = DEFAULT_BUFFER_SIZE << 4

    def __init__(self, algorithm:str=DEFAULT_ALGORITHM) -> None:
        if algorithm not in ALGORITHMS:
            raise ValueError(f"Unknown hash algorithm {algorithm}. Choose from {tuple(ALGORITHMS)}")
        self.algorithm = algorithm
        self.buffer = bytearray(Hash.BUFSIZE)


    def hash_file(self, filename:str) -> str:
        """
        Hash the entire contents of filename.

        filename -- the name of the file we want to hash.

        returns -- the hex digest.

        raises -- HashError if the file cannot be opened or read.
        """
        hasher = ALGORITHMS[self.algorithm]()
        view = memoryview(self.buffer)
        try:
            with open(filename, 'rb', buffering=0) as f:
                while (n := f.readinto(self.buffer)):
                    hasher.update(view[:n])

        except OSError as e:
            raise HashError(filename, e) from e

        return hasher.hexdigest()
