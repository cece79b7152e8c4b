# -*- coding: utf-8 -*-
import typing
from   typing import *


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
import sys

min_py = (3, 11)

if sys.version_info < min_py:
    print(f"This program requires at least Python {min_py[0]}.{min_py[1]}")
    sys.exit(os.EX_SOFTWARE)

import argparse
import contextlib
from   logging import CRITICAL, ERROR, WARNING, INFO, DEBUG
import tomllib

#####################################
# Parts of this project
#####################################

import contenthash
import fileutils
import fsgenerators
from   help import hrdups_help
from   hrerrors import ConfigError, FatalError, HashError
from   hrlogger import HRLogger
from   mutator import Mutator
from   runcontext import RunContext, RunReport
from   sizebuckets import SizeBuckets

###
# The keys that may appear in the config file, and what they must be.
###
config_keys = {
    'dirs' : list,
    'keep' : bool,
    'pretend' : bool,
    'remove' : bool,
    'verbose' : int,
    'hash' : str,
    'loglevel' : int,
    'logfile' : str,
    'nice' : int
    }

loglevels = (CRITICAL, ERROR, WARNING, INFO, DEBUG)
niceness = range(0, 21)


def load_config(configfile:str, required:bool=False) -> dict:
    """
    Read the TOML file of defaults. A missing file is no problem
    unless the user named it explicitly.
    """
    try:
        with open(configfile, 'rb') as f:
            config = tomllib.load(f)
    except FileNotFoundError as e:
        if required: raise ConfigError(f"{configfile} not found.") from e
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"{configfile}: {e}") from e

    for k, v in config.items():
        if k not in config_keys:
            raise ConfigError(f"{configfile}: unknown key {k}")
        if not isinstance(v, config_keys[k]) or (config_keys[k] is int and isinstance(v, bool)):
            raise ConfigError(f"{configfile}: {k} must be of type {config_keys[k].__name__}")

    if config.get('hash', contenthash.DEFAULT_ALGORITHM) not in contenthash.ALGORITHMS:
        raise ConfigError(f"{configfile}: hash must be one of {', '.join(contenthash.ALGORITHMS)}")
    if config.get('loglevel', INFO) not in loglevels:
        raise ConfigError(f"{configfile}: loglevel must be one of {', '.join(str(x) for x in loglevels)}")
    if config.get('nice', 0) not in niceness:
        raise ConfigError(f"{configfile}: nice must be from {niceness.start} to {niceness.stop-1}")

    return config


def build_hash_map(context:RunContext) -> SizeBuckets:
    """
    The first pass. Nothing is changed, and nothing that goes wrong
    here stops the run; the problems are collected in the report.
    """
    print("Building hash map...")
    context.logger.info('scan begun')
    buckets = context.buckets

    i = 0
    for root in context.roots:
        for i, f in enumerate(fsgenerators.files_and_stats(root, context.recoverable), start=i+1):
            try:
                buckets << f
            except HashError as e:
                context.recoverable(e)

    context.logger.info('scan finished')
    context.logger.info(f"scanned {i} files.")
    context.logger.info(f"{len(buckets)} distinct lengths.")
    context.logger.info(f"{buckets.unhashed} lengths with only one file, never hashed.")
    context.logger.info(f"{buckets.hash_count} files hashed.")
    context.logger.info(f"{len(context.report.warnings)} warnings.")
    return buckets


def collapse_duplicates(context:RunContext) -> RunReport:
    """
    The second pass. A FatalError ends it, and is recorded in the
    report rather than allowed to escape.
    """
    print("Removing..." if context.remove else "Hard-linking...")
    try:
        Mutator(context).run(context.buckets.duplicates())
    except FatalError as e:
        context.fatal(e)
        return context.report

    print("Done!")
    print(f"Saved {fileutils.mib(context.report.saved)}")
    context.logger.info(f"{context.report.groups} groups, {context.report.saved} bytes saved.")
    return context.report


def run(context:RunContext) -> RunReport:
    """
    Both passes, one after the other.
    """
    build_hash_map(context)
    return collapse_duplicates(context)


def hrdups_main(myargs:argparse.Namespace) -> int:
    logger = HRLogger(logfile=myargs.logfile, level=myargs.loglevel)
    try:
        context = RunContext.from_args(myargs, logger)
        return run(context).exit_code
    finally:
        logger.close()


def hrdups_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='hrdups',
        description='hrdups: Hardlink (or remove) duplicate files.')

    parser.add_argument('-?', '--explain', action='store_true',
        help="a longer explanation of how this works.")

    parser.add_argument('dirs', nargs="*", default=['.'],
        help="directories to investigate (if not *this* directory)")

    parser.add_argument('--config', type=str, default=None,
        help="TOML file of defaults. ./hrdups.toml is read if it exists.")

    parser.add_argument('--hash', type=str, default=contenthash.DEFAULT_ALGORITHM,
        choices=tuple(contenthash.ALGORITHMS),
        help=f"digest to compare contents, defaults to {contenthash.DEFAULT_ALGORITHM}")

    parser.add_argument('-k', '--keep', action='store_true',
        help="keep empty folders on remove")

    parser.add_argument('--logfile', type=str, default=None,
        help="also write the log to this file.")

    parser.add_argument('--loglevel', type=int, default=INFO,
        choices=loglevels,
        help=f"Logging level for the logfile, defaults to {INFO}")

    parser.add_argument('--nice', type=int, default=0, choices=niceness,
        help="run at this niceness; the default is not to change it.")

    parser.add_argument('-o', '--output', type=str, default="",
        help="Output file name")

    parser.add_argument('-p', '--pretend', action='store_true',
        help="dry-run")

    parser.add_argument('-r', '--remove', action='store_true',
        help="don't hardlink duplicates, just remove")

    parser.add_argument('-v', '--verbose', action='count', default=0,
        help="explain hashing process (repeat the option for more verbose output)")

    parser.add_argument('--version', action='version',
        version=f"hrdups {__version__}")

    parser.add_argument('-z', '--zap', action='store_true',
        help="remove old logfile before starting.")

    return parser


def cli(argv:list=None) -> int:
    parser = hrdups_parser()

    ###
    # Parse once to find the config file, let the config file
    # set the defaults, and then parse again so that the command
    # line has the last word.
    ###
    myargs = parser.parse_args(argv)
    if myargs.explain: return hrdups_help()

    here = os.getcwd()
    configfile = myargs.config if myargs.config else f"{here}/hrdups.toml"
    try:
        config = load_config(fileutils.expandall(configfile), required=bool(myargs.config))
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return os.EX_USAGE

    if config:
        parser.set_defaults(**config)
        myargs = parser.parse_args(argv)

    if myargs.zap and myargs.logfile:
        try:
            os.unlink(myargs.logfile)
        except FileNotFoundError:
            pass
        except OSError as e:
            print(f"Could not remove {myargs.logfile}: {e.strerror}", file=sys.stderr)

    if myargs.nice: os.nice(myargs.nice)

    outfile = sys.stdout
    try:
        outfile = sys.stdout if not myargs.output else open(myargs.output, 'w')
        with contextlib.redirect_stdout(outfile):
            return hrdups_main(myargs)

    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return os.EX_TEMPFAIL

    except Exception as e:
        print(f"Escaped or re-raised exception: {e}", file=sys.stderr)
        return os.EX_SOFTWARE

    finally:
        if outfile is not sys.stdout: outfile.close()


if __name__ == "__main__":
    sys.exit(cli())
