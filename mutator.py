# -*- coding: utf-8 -*-
"""
The second pass. Each duplicate group is turned into changes to the
file system: every member after the first (the base) is either
replaced by a hard link to the base, or removed.

Each pair (base, duplicate) goes through the same few states:

    Pending -> AttributeChecked -> HardlinkApplied
                                -> Removed
                                -> Skipped

A pair whose owner, group, mode, or device disagree is skipped and
reported. A delete or a link that fails ends the run; nothing that
was already done is undone.
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
from   collections.abc import Iterable
import enum
import stat

###
# imports and objects that were written for this project.
###
import dirpruner
from   fileclass import FileClass, attributes_match, parse_st_mode
from   hrerrors import MutationError
from   sizebuckets import DuplicateGroup

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


class Action(enum.IntEnum):
    """
    What became of a duplicate.
    """
    SKIPPED = 0
    HARDLINKED = 1
    REMOVED = 2


class MutationRecord(NamedTuple):
    base: str
    duplicate: str
    attributes_matched: bool
    action: Action
    reclaimed: int
    note: str = ""


class Mutator:
    """
    Usage:

        mutator = Mutator(context)
        saved = mutator.run(context.buckets.duplicates())

    With context.pretend set, the accounting is identical and the
    file system is not touched.
    """

    def __init__(self, context:object) -> None:
        self.context = context
        self.logger = context.logger
        self.number = 0


    def run(self, groups:Iterable[DuplicateGroup]) -> int:
        """
        Collapse every group. Returns the number of bytes saved, which
        is also accumulated in the context's report.

        raises -- MutationError, the first time a destructive operation
            fails. Everything up to that point stays as it is.
        """
        saved = 0
        for group in groups:
            if len(group.paths) < 2: continue
            for record in self.collapse(group):
                saved += record.reclaimed
        return saved


    def collapse(self, group:DuplicateGroup) -> Iterator[MutationRecord]:
        """
        Print the group, and deal with each of its duplicates in turn.
        """
        self.number += 1
        self.context.report.groups += 1
        print(f"Group {self.number}:")
        print(f"*\t{group.base}")
        self.logger.info(f"group {self.number}: {len(group.paths)} files of {group.size} bytes, {group.digest}")

        for duplicate in group.duplicates:
            print(f"\t{duplicate}")
            record = self.collapse_pair(group.base, duplicate, group.size)
            self.context.report.records.append(record)
            self.context.report.saved += record.reclaimed
            yield record


    def collapse_pair(self, base:str, duplicate:str, size:int) -> MutationRecord:
        """
        Move one pair from Pending to one of the terminal states.
        """
        # Pending -> AttributeChecked
        if not attributes_match(base, duplicate):
            print(f"Owner/mode mismatch {base} and {duplicate}")
            self.logger.info(f"mismatch {FileClass(base).printable} and {FileClass(duplicate).printable}")
            return MutationRecord(base, duplicate, False, Action.SKIPPED, 0, "owner/mode mismatch")

        if not self.context.remove and FileClass(base) == FileClass(duplicate):
            self.logger.info(f"{duplicate} is already a link to {base}")
            return MutationRecord(base, duplicate, True, Action.SKIPPED, 0, "already linked")

        action = Action.REMOVED if self.context.remove else Action.HARDLINKED
        if self.context.pretend:
            self.logger.info(f"would have {action.name.lower()} {duplicate}")
            return MutationRecord(base, duplicate, True, action, size, "pretend")

        self.unlink(duplicate)
        if self.context.remove:
            if not self.context.keep:
                dirpruner.prune_empty_parent(duplicate, self.context)
        else:
            self.link(base, duplicate)

        self.logger.info(f"{action.name.lower()} {duplicate}")
        return MutationRecord(base, duplicate, True, action, size)


    def unlink(self, duplicate:str) -> None:
        try:
            os.unlink(duplicate)
        except OSError as e:
            raise MutationError(duplicate, e, "delete file") from e


    def link(self, base:str, duplicate:str) -> None:
        """
        Make duplicate a hard link to base, and then see to it that
        the link has base's owner, group, and mode. The link shares the
        inode, so the second part ought to change nothing; if it fails
        we only complain about it.
        """
        try:
            os.link(base, duplicate)
        except OSError as e:
            raise MutationError(f"{base} as {duplicate}", e, "create hardlink for") from e

        try:
            info = os.stat(base)
        except OSError as e:
            self.logger.warning(f"Cannot stat \"{base}\" after linking: {e.strerror}.")
            return

        try:
            os.chown(duplicate, info.st_uid, info.st_gid)
            os.chmod(duplicate, stat.S_IMODE(info.st_mode))
        except OSError as e:
            _, _, octal_str = parse_st_mode(info.st_mode)
            self.logger.warning(f"Cannot set {info.st_uid}:{info.st_gid} {octal_str} on \"{duplicate}\": {e.strerror}.")
