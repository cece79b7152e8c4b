# -*- coding: utf-8 -*-
"""
The exceptions that hrdups raises. There are two families, and
the difference between them is the whole error policy of the
program:

    RecoverableError -- something went wrong while we were building
        the hash map. Warn about it, skip the file or subtree, and
        keep going.

    FatalError -- something went wrong while we were changing the
        file system. Stop right there. Whatever was already done
        stays done.
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


class HRDupsError(Exception):
    """
    Something about a path did not work. The message is built
    the same way for all the subclasses:

        Cannot <what> "<path>": <system error text>.
    """
    what = "process"

    def __init__(self, path:str, error:OSError=None, what:str=None) -> None:
        self.path = path
        self.error = error
        if what is not None: self.what = what
        Exception.__init__(self, str(self))


    @property
    def reason(self) -> str:
        if self.error is None: return "unknown error"
        if isinstance(self.error, OSError) and self.error.strerror:
            return self.error.strerror
        return str(self.error)


    def __str__(self) -> str:
        return f'Cannot {self.what} "{self.path}": {self.reason}.'


class RecoverableError(HRDupsError): pass

class TraversalError(RecoverableError):
    """
    A directory could not be listed, or an entry could not be stat-ed.
    """
    what = "read"

class HashError(RecoverableError):
    """
    A file could not be opened or read while computing its digest.
    """
    what = "open"


class FatalError(HRDupsError): pass

class MutationError(FatalError):
    """
    A delete, link, or rmdir failed. These are not to be tolerated.
    """
    what = "delete file"


class ConfigError(Exception):
    """
    The TOML file has something in it we do not understand.
    """
    pass
