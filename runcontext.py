# -*- coding: utf-8 -*-
"""
Everything one run of hrdups knows: the options, the hash map that
is built in the first pass, and the report of what happened. The
orchestrator creates exactly one of these and hands it to each
part of the program that needs it.
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
import argparse
import logging

###
# imports and objects that were written for this project.
###
import contenthash
from   hrerrors import FatalError, RecoverableError
from   hrlogger import HRLogger
from   sizebuckets import SizeBuckets

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


class RunReport:
    """
    The outcome of a run. Recoverable errors pile up in warnings;
    a fatal error, if there is one, ends the run and is kept in fatal.
    """

    __slots__ = {
        'warnings' : "RecoverableErrors seen while building the hash map",
        'records' : "one MutationRecord per duplicate considered",
        'groups' : "number of groups with at least two members",
        'saved' : "bytes reclaimed (or that would be, with --pretend)",
        'fatal' : "the FatalError that stopped the run, or None"
        }

    def __init__(self) -> None:
        self.warnings = []
        self.records = []
        self.groups = 0
        self.saved = 0
        self.fatal = None


    def __bool__(self) -> bool:
        """
        True if the run finished.
        """
        return self.fatal is None


    @property
    def exit_code(self) -> int:
        return os.EX_OK if self.fatal is None else os.EX_IOERR


class RunContext: pass
class RunContext:
    """
    The options for this run, and the objects that carry its state.
    """

    __slots__ = {
        'roots' : "directories to scan, in the order given",
        'keep' : "keep directories emptied by --remove",
        'pretend' : "report, but change nothing",
        'remove' : "delete duplicates rather than link them",
        'verbose' : "0 is quiet, 1 shows names as they are hashed, 2 adds the digest",
        'hasher' : "the contenthash.Hash for this run",
        'logger' : "an HRLogger",
        'buckets' : "the SizeBuckets built in the first pass",
        'report' : "the RunReport"
        }

    __values__ = (['.'], False, False, False, 0, None, None, None, None)
    __defaults__ = dict(zip(__slots__, __values__))


    def __init__(self, **kwargs) -> None:
        for k, v in RunContext.__defaults__.items():
            setattr(self, k, v)
        for k, v in kwargs.items():
            if k not in RunContext.__slots__:
                raise TypeError(f"Unknown parameter {k}")
            setattr(self, k, v)

        self.roots = list(self.roots)
        if self.hasher is None: self.hasher = contenthash.Hash()
        if self.logger is None: self.logger = HRLogger(level=logging.WARNING)
        if self.buckets is None: self.buckets = SizeBuckets(self)
        if self.report is None: self.report = RunReport()


    @classmethod
    def from_args(cls, myargs:argparse.Namespace, logger:HRLogger=None) -> RunContext:
        return cls(roots=myargs.dirs or ['.'],
            keep=myargs.keep,
            pretend=myargs.pretend,
            remove=myargs.remove,
            verbose=myargs.verbose,
            hasher=contenthash.Hash(myargs.hash),
            logger=logger)


    def recoverable(self, e:RecoverableError) -> None:
        """
        Note the problem, and carry on.
        """
        self.report.warnings.append(e)
        self.logger.warning(str(e))


    def fatal(self, e:FatalError) -> None:
        self.report.fatal = e
        self.logger.critical(str(e))


    def hashing(self, path:str) -> None:
        """
        Called just before path is read, so that with -v a file that
        cannot be read is shown next to its warning.
        """
        if not self.verbose: return
        print(f"\t{path}", end="" if self.verbose > 1 else "\n", flush=True)


    def hashed(self, path:str, digest:str) -> None:
        """
        digest is None if path could not be read.
        """
        self.logger.debug(f"{path} {digest}")
        if self.verbose < 2: return
        print(f" {digest}" if digest is not None else "")
