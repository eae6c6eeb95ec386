"""Argument parsing functionality for pkgsweep."""

import argparse
from constants import Constants

def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="pkgsweep",
        description=(
            "pkgsweep - Remove package archives superseded by a newer version"
        ),
        add_help=True,
    )

    parser.add_argument("directory",
                        metavar="DIRECTORY",
                        nargs="?",
                        help="Directory holding the package archives (default: current working directory)",
                        type=str)
    parser.add_argument("-c", "--confirm",
                        dest="CONFIRM_LEVEL",
                        help=(
                            "What to ask before acting: none, removal (default), "
                            "ambiguities, or everything (review every version)"
                        ),
                        action="store", type=str.lower,
                        default=Constants.DEFAULT_CONFIRM_LEVEL,
                        choices=Constants.CONFIRM_LEVELS)
    parser.add_argument("-n", "--dry-run",
                        dest="DRY_RUN",
                        help="List what would be removed and ignored, remove nothing.",
                        action="store_true")
    parser.add_argument("--show-dates",
                        dest="SHOW_DATES",
                        help="Show file modification times next to ambiguous versions.",
                        action="store_true")
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=Constants.LOG_LEVELS,
                        default='INFO')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    args = parser.parse_args(argv)
    args.DIRECTORY = args.directory
    return args
