"""pkgsweep - Remove package archives superseded by a newer version

    Returns:
        int: Exit code
"""
import logging
import os
import sys

from constants import ExitCodes
from common.logging_utils import configure_logging
from args import parse_args
from errors import IntegrityError
from options import Options
from sweep import remove_old_packages


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)
    logger = logging.getLogger(__name__)

    if not args.DIRECTORY:
        logger.info("No folder was provided, using current working directory...")
    options = Options.from_args(args)

    if not os.path.isdir(options.directory):
        logger.error(
            "Error: provided argument `%s` is not a directory.", options.directory
        )
        sys.exit(ExitCodes.NOT_A_DIRECTORY.value)

    try:
        remove_old_packages(options)
    except IntegrityError as e:
        logger.critical("%s", e)
        sys.exit(ExitCodes.INTEGRITY_ERROR.value)
    except OSError as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(ExitCodes.IO_ERROR.value)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)  # Standard SIGINT exit code

    sys.exit(ExitCodes.SUCCESS.value)

if __name__ == "__main__":
    main()
