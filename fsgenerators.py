# -*- coding: utf-8 -*-
import typing
from   typing import *

min_py = (3, 11)

###
# Standard imports, starting with os and sys
###
import os
import sys
if sys.version_info < min_py:
    print(f"This program requires Python {min_py[0]}.{min_py[1]}, or higher.")
    sys.exit(os.EX_SOFTWARE)

###
# Other standard distro imports
###
from   collections.abc import Callable, Iterator

###
# imports and objects that are a part of this project
###
from   fileclass import FileClass
from   hrerrors import TraversalError

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


def _complain(e:TraversalError, on_error:Callable) -> None:
    if on_error is None: raise e
    on_error(e)


def all_files_in(d:str, on_error:Callable=None) -> Iterator[str]:
    """
    A generator to cough up the names of the regular files under d,
    depth first. Symbolic links, whether to files or to directories,
    are skipped; they are never followed.

    Within a directory the entries are taken in name order, so two
    runs over the same tree see the files in the same order.

    d -- The name of a directory.
    on_error -- called with a TraversalError when a directory cannot
        be listed. Only that subtree is abandoned. If None, the error
        is raised instead.
    """
    try:
        with os.scandir(d) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        _complain(TraversalError(d, e), on_error)
        return

    for entry in entries:
        try:
            if entry.is_symlink(): continue
            if entry.is_dir(follow_symlinks=False):
                yield from all_files_in(entry.path, on_error)
            elif entry.is_file(follow_symlinks=False):
                yield entry.path
        except OSError as e:
            _complain(TraversalError(entry.path, e), on_error)


def files_and_stats(d:str, on_error:Callable=None) -> Iterator[FileClass]:
    """
    return the files under d, along with their lstat info.

    d -- The name of a directory.
    on_error -- as in all_files_in(). A file we cannot stat is
        reported this way and skipped.
    """
    for f in all_files_in(d, on_error):
        try:
            stats = os.lstat(f)
        except OSError as e:
            _complain(TraversalError(f, e), on_error)
            continue

        yield FileClass(f, stats)
