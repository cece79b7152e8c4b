# -*- coding: utf-8 -*-

#pragma pylint=off
    
# Credits
__author__ =        'hrdups authors'
__copyright__ =     'Copyright 2025'
__credits__ =       'None. This idea has been around forever.'
__version__ =       '0.3'
__maintainer__ =    'hrdups authors'
__email__ =         None
__status__ =        'continual development.'
__license__ =       'MIT'

import os
import textwrap

def hrdups_help() -> int:
    """
    `hrdups` finds files that are byte for byte identical, and
    replaces all but one of each set with a hard link to the one
    that is left. With --remove, it deletes them instead.

    It works in two passes, and the first pass changes nothing:

    - Every regular file under the directories you name is stat-ed
        and put in a bucket with the other files of the same size.
        Symbolic links are never followed, and empty files are never
        considered. If two files differ in length, they are obviously
        not the same file.
    - A file is only read (and hashed) when a second file of the same
        size turns up. Most files have a size that nothing else has,
        and those are never read at all.
    - Files with the same size and the same SHA-256 digest are a
        group. The first one found is the base; the others are the
        duplicates.

    The second pass goes through the groups. A duplicate is only
    touched if it has the same owner, group, and mode as its base,
    and lives on the same device. Otherwise you will see

        Owner/mode mismatch <base> and <duplicate>

    and the pair is left alone. If a delete or a link fails, the
    program stops right there. What has already been done stays done.

    THE OPTIONS:
    ==================================================================

    -h / --help :: The short version.

    -? / --explain :: This is it; you are here. There is no more.

    dir [dir .. ] 
        The directories to examine. The default is the current
        directory. Within a directory the entries are visited in
        name order, so the base of a group is the first member in
        that order.

    -k / --keep
        With --remove, a directory that is left empty is normally
        removed too (but only the directory that held the file, not
        its parents). This switch keeps it.

    -p / --pretend
        Do everything except change the file system. The amount
        reported as saved is what a real run would save.

    -r / --remove
        Delete the duplicates rather than linking them to the base.

    -v / --verbose
        Print the name of each file as it is hashed. Say it twice
        (-vv) to see the digests as well.

    --hash {sha256 | sha512 | blake2b | xxh128}
        The digest to use. xxh128 is much faster, and it is not a 
        cryptographic hash. The default is sha256.

    --config {file}
        A TOML file of defaults. The keys are the long option names
        (keep, pretend, remove, verbose, hash, loglevel, logfile, nice).
        The default is ./hrdups.toml, if there is one.

    --logfile {file} / --loglevel {int} / -z / --zap
        Warnings always go to the console. If you name a logfile, the
        messages at or above loglevel are written there as well, and
        --zap removes the old one first.

    --nice {int}
        Be nice to the other people on this computer.

    -o / --output {file}
        Send what is normally printed to a file instead.
    """

    print(textwrap.dedent(hrdups_help.__doc__))
    return os.EX_OK
