# -*- coding: utf-8 -*-
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
# imports and objects that were written for this project.
###
import fileutils
from   hrerrors import MutationError

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


def prune_empty_parent(path:str, context:object) -> str:
    """
    After path has been removed, remove the directory that held it
    if there is nothing left in it. Only the immediate parent is
    considered; we do not climb any higher.

    path -- the file that was just removed.
    context -- the RunContext, for logging.

    returns -- the name of the directory that was removed, or None.

    raises -- MutationError if the directory is empty and cannot be
        removed.
    """
    d = os.path.dirname(path) or os.curdir
    if not fileutils.is_empty_dir(d): return None

    try:
        os.rmdir(d)
    except OSError as e:
        raise MutationError(d, e, "delete empty directory") from e

    print(f"Empty directory removed {d}")
    context.logger.info(f"removed empty directory {d}")
    return d
