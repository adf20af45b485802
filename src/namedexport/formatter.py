"""Formatter pass: pipe printed source through prettier."""

import logging
import shutil
import subprocess

from namedexport.config import DEFAULT_PRETTIER_COMMAND
from namedexport.errors import FormatterError

logger = logging.getLogger(__name__)


def format_source(
    text: str,
    filepath: str,
    command: tuple[str, ...] = DEFAULT_PRETTIER_COMMAND,
) -> tuple[str, bool]:
    """Format ``text`` with prettier, using ``filepath`` to pick the parser.

    Args:
        text: Printed source
        filepath: Path hint passed as --stdin-filepath
        command: Prettier executable plus leading arguments,
            e.g. ("npx", "prettier")

    Returns:
        (text, formatted) tuple; formatted is False when the executable is not
        installed and ``text`` is returned unchanged

    Raises:
        FormatterError: If prettier exits with a non-zero status
    """
    executable = shutil.which(command[0])
    if executable is None:
        logger.warning("Formatter %s not found; output left unformatted", command[0])
        return text, False

    completed = subprocess.run(
        [executable, *command[1:], "--stdin-filepath", filepath],
        input=text,
        capture_output=True,
        text=True,
        check=False,
    )
    if completed.returncode != 0:
        raise FormatterError(completed.returncode, completed.stderr)
    return completed.stdout, True
