class S2UtilError(Exception):
    """Base error, carries the process exit code for the CLI."""

    exit_code = 1


class InvalidLevelError(S2UtilError):
    exit_code = 1


class InvalidCoordinatesError(S2UtilError):
    exit_code = 2


class InvalidCellError(S2UtilError):
    exit_code = 3


class InvalidTokenError(InvalidCellError):
    """A --cell-token that is not a valid cell, exits 1 unlike a cell derived from coordinates."""

    exit_code = 1


class OutputError(S2UtilError):
    exit_code = 1
