# -*- coding: utf-8 -*-
"""
Class to assist with the process of locating duplicate files, and
the comparison of the attributes that must agree before one file
may be replaced by a link to another.
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
import stat

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


os_FILETYPES = {
    stat.S_IFDIR: "d",
    stat.S_IFREG: "f",
    stat.S_IFLNK: "l",
    stat.S_IFCHR: "c",
    stat.S_IFBLK: "b",
    stat.S_IFIFO: "p",
    stat.S_IFSOCK: "s"
}


class FileClass: pass
class FileClass:
    """
    FileClass is intended to make dedup-ing simpler and
    less error prone.

    Let's say our files are f1 and f2

          Expression    |   True when ....
    --------------------+----------------------------------------------
        !f1             | we could not stat f1
    --------------------+----------------------------------------------
        f1 == f2        | f1 and f2 are the same file (same device
                        |   and inode)
    --------------------+----------------------------------------------
        f1 != f2        | f1 and f2 are different files
    --------------------+----------------------------------------------
        f1 % f2         | f1 and f2 agree on owner, group, mode, and
                        |   device, so one may replace the other.
    --------------------+----------------------------------------------
        int(f1)         | the size of f1 in bytes.
    --------------------+----------------------------------------------

    Nothing here follows symbolic links; the stat info is from lstat.
    """

    __slots__ = {
        'name' : "the file's complete name",
        'inodedata' : "the info from os.lstat()",
        'usable' : "whether we could get the inodedata"
        }

    __values__ = ("", None, False)
    __defaults__ = dict(zip(__slots__, __values__))


    def __init__(self, name:str, inodedata:os.stat_result=None) -> None:
        for k, v in FileClass.__defaults__.items():
            setattr(self, k, v)

        self.name = name
        if inodedata is None:
            try:
                inodedata = os.lstat(name)
            except OSError:
                inodedata = None

        self.inodedata = inodedata
        self.usable = self.inodedata is not None


    def __bool__(self) -> bool:
        return self.usable


    def __str__(self) -> str:
        """
        This is what most people mean by the name.
        """
        return os.path.basename(self.name)


    def __repr__(self) -> str:
        """
        The whole file name.
        """
        return self.name


    def __eq__(self, other:FileClass) -> bool:
        if not isinstance(other, FileClass): return NotImplemented
        if not (self.usable and other.usable): return False

        # Two names for the same inode on the same device are
        # the same file. This function effectively works like "is".
        return ( self.inodedata.st_ino == other.inodedata.st_ino and
                 self.inodedata.st_dev == other.inodedata.st_dev )


    def __mod__(self, other:FileClass) -> bool:
        if not isinstance(other, FileClass): return NotImplemented
        if not (self.usable and other.usable): return False
        a, b = self.inodedata, other.inodedata
        return ( a.st_uid == b.st_uid and
                 a.st_gid == b.st_gid and
                 a.st_mode == b.st_mode and
                 a.st_dev == b.st_dev )


    def __int__(self) -> int:
        """
        return the file's size as an integer.
        """
        return self.inodedata.st_size if self.usable else 0


    @property
    def is_regular(self) -> bool:
        return self.usable and stat.S_ISREG(self.inodedata.st_mode)


    @property
    def printable(self) -> str:
        ftype, _, octal_str = parse_st_mode(self.inodedata.st_mode) if self.usable else ('?', 0, '????')
        uid, gid = (self.inodedata.st_uid, self.inodedata.st_gid) if self.usable else (-1, -1)
        return f"{self.name} [{ftype} {octal_str} {uid}:{gid}]"


def attributes_match(a:str, b:str) -> bool:
    """
    Do the files named a and b have the same owner, group, mode,
    and device? If either one cannot be stat-ed, the answer is no.
    """
    return FileClass(a) % FileClass(b)


def parse_st_mode(mode:int) -> tuple:
    """
    Parse the information packed into st_mode.

    mode -- the numeric value of os.stat().st_mode

    returns -- (filetype, permissions, permissions as an octal string)
    """
    global os_FILETYPES

    ftype = os_FILETYPES.get(stat.S_IFMT(mode), '?')
    permissions=stat.S_IMODE(mode)
    octal_str = format(permissions, "04o")

    return (ftype, permissions, octal_str)
