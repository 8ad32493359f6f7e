"""Precondition check for the solution path argument."""

from pathlib import Path

MISSING_ARGUMENT_MESSAGE = (
    "Please provide the path to the Visual Studio solution file as a command line "
    "argument."
)
MISSING_FILE_MESSAGE = "The specified solution file does not exist."


def validate_solution_path(raw: str | None) -> Path | None:
    """Return the absolute solution path, or print why it is unusable and return None."""
    if not raw:
        print(MISSING_ARGUMENT_MESSAGE)
        return None
    path = Path(raw)
    if not path.is_file():
        print(MISSING_FILE_MESSAGE)
        return None
    return path.resolve()
