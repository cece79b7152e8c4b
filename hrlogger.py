# -*- coding: utf-8 -*-
"""
A thin wrapper around the standard logging module. The console always
gets the warnings (and worse), because the operator needs to see them
while the program runs. If a logfile is named, everything at or above
the requested level also goes to a rotating file.
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
import logging
from   logging.handlers import RotatingFileHandler

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


class HRLogger:
    """
    Usage:

        logger = HRLogger(logfile='hrdups.log', level=logging.INFO)
        logger.info('scan begun')
    """

    __slots__ = {
        'logfile' : "where the file handler writes, or None",
        'level' : "the level for the logfile",
        'logger' : "the logging.Logger that does the work"
        }

    file_format = "#%(levelname)-8s [%(asctime)s] (%(process)d) %(module)s: %(message)s"
    console_format = "%(levelname)s: %(message)s"


    def __init__(self, *,
        logfile:str=None,
        level:int=logging.WARNING,
        name:str='hrdups',
        rotation_size:int=1<<24,
        backup_count:int=2) -> None:

        self.logfile = logfile
        self.level = level
        self.logger = logging.getLogger(name)
        self.logger.propagate = False

        # Building a second HRLogger with the same name replaces
        # the handlers rather than doubling every message.
        for h in list(self.logger.handlers):
            self.logger.removeHandler(h)
            h.close()

        console = logging.StreamHandler(sys.stderr)
        console.setLevel(logging.WARNING)
        console.setFormatter(logging.Formatter(HRLogger.console_format))
        self.logger.addHandler(console)

        if logfile:
            f = RotatingFileHandler(logfile,
                maxBytes=rotation_size, backupCount=backup_count)
            f.setLevel(level)
            f.setFormatter(logging.Formatter(HRLogger.file_format))
            self.logger.addHandler(f)

        self.logger.setLevel(min(level, logging.WARNING))


    def debug(self, s:str) -> None:
        self.logger.debug(s)

    def info(self, s:str) -> None:
        self.logger.info(s)

    def warning(self, s:str) -> None:
        self.logger.warning(s)

    def critical(self, s:str) -> None:
        self.logger.critical(s)


    def close(self) -> None:
        for h in list(self.logger.handlers):
            self.logger.removeHandler(h)
            h.close()
