# -*- coding: utf-8 -*-
""" Generic, bare functions, not a part of any object or service. """

# Added for Python 3.5+
import typing
from typing import *

import os
    
# Credits
__author__ = 'hrdups authors'
__copyright__ = 'Copyright 2025'
__credits__ = None
__version__ = '0.3'
__maintainer__ = 'hrdups authors'
__email__ = None
__status__ = 'in progress'

__license__ = 'MIT'

MiB = 1 << 20

####
# E
####

def expandall(s:str) -> str:
    """
    Expand all the user vars into an absolute path name. If the 
    argument happens to be None, it is OK.
    """
    return s if s is None else os.path.abspath(os.path.expandvars(os.path.expanduser(s)))
    

####
# I
####

def is_empty_dir(d:str) -> bool:
    """
    True if d is a directory with nothing in it. A directory we
    cannot look into is not known to be empty.
    """
    if not os.path.isdir(d): return False
    try:
        with os.scandir(d) as it:
            return next(it, None) is None
    except OSError:
        return False


####
# M
####

def mib(n:int) -> str:
    """
    A byte count as MiB with two decimals, the way the summary
    line reports it.
    """
    return f"{n / MiB:.2f}MiB"
