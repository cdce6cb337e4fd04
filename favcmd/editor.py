"""Opening the store in the user's text editor."""
import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from favcmd.constants import DEFAULT_EDITOR
from favcmd.exceptions import FavCmdError

logger = logging.getLogger(__name__)


def resolve_editor(configured: Optional[str] = None) -> List[str]:
    """
    Work out which editor to run.

    Priority:
        1. Editor set in the fav-cmd config
        2. VISUAL environment variable
        3. EDITOR environment variable
        4. DEFAULT_EDITOR

    Returns:
        The editor command split into argv form
    """
    for candidate in (configured, os.environ.get("VISUAL"), os.environ.get("EDITOR")):
        if candidate and candidate.strip():
            return shlex.split(candidate)
    return [DEFAULT_EDITOR]


def open_in_editor(path: Union[str, Path], editor: Optional[str] = None) -> int:
    """
    Open a file in the editor and wait for it to exit.

    The editor owns the terminal until it returns. The file content is
    not checked afterwards.

    Returns:
        The editor's exit status

    Raises:
        FavCmdError: If the editor cannot be started
    """
    argv = resolve_editor(editor) + [str(path)]
    logger.debug(f"Running {argv}")
    try:
        result = subprocess.run(argv)
    except FileNotFoundError:
        raise FavCmdError(
            f"Editor '{argv[0]}' not found. Set EDITOR or the 'editor' config key."
        )
    if result.returncode != 0:
        logger.warning(f"Editor exited with status {result.returncode}")
    return result.returncode
