"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    NOT_A_DIRECTORY = 1
    IO_ERROR = 2
    INTEGRITY_ERROR = 3


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    CONFIRM_LEVELS = ["none", "removal", "ambiguities", "everything"]
    DEFAULT_CONFIRM_LEVEL = "removal"
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

    # Package file naming: <name>-<pkgver>-<pkgrel>-<arch>.pkg.tar.<compression>
    PACKAGE_MARKER = ".pkg.tar"
    SIGNATURE_SUFFIX = ".sig"
    EPOCH_SEPARATOR = ":"
    IGNORE_ANSWER = "i"
    CONFIRM_ANSWER = "y\n"

    SECTION_RULE = "\n------------"
    CONFIRM_PROMPT = "Are you agreeing to these removals ? Type `y` and press enter if you do."
    CHOOSE_PROMPT = (
        "> The index corresponding to the version to keep (default 0), or `i` to ignore :"
    )
    DATE_FORMAT = "%a, %d %b %Y %H:%M:%S"
