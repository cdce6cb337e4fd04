"""
Interactive selection through an external fuzzy filter.

The filter is a collaborator, not something fav-cmd implements: it is
handed the display lines and returns at most one of them. ``Selector``
is the seam; ``FzfSelector`` runs fzf as a subprocess and tests use a
stub.
"""
import logging
import shutil
import subprocess
import sys
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from favcmd.constants import (
    FZF_EXECUTABLE,
    FZF_EXIT_INTERRUPTED,
    FZF_EXIT_NO_MATCH,
    FZF_EXIT_SELECTED,
)
from favcmd.exceptions import DependencyMissing, SelectorError

logger = logging.getLogger(__name__)


INSTALL_HINTS = {
    "darwin": ["brew install fzf"],
    "linux": [
        "Debian/Ubuntu: sudo apt install fzf",
        "Fedora:        sudo dnf install fzf",
        "Arch:          sudo pacman -S fzf",
    ],
    "win32": ["winget install fzf", "scoop install fzf"],
}


def install_hint(platform: Optional[str] = None) -> str:
    """Installation guidance for fzf on the given (or current) platform."""
    platform = platform or sys.platform
    key = "linux" if platform.startswith("linux") else platform
    lines = INSTALL_HINTS.get(key, [])
    lines = lines + ["See https://github.com/junegunn/fzf#installation"]
    return "\n".join(f"  {line}" for line in lines)


class Selector(ABC):
    """Presents display lines to the user and returns the chosen one."""

    @abstractmethod
    def present(self, lines: Sequence[str]) -> Optional[str]:
        """
        Show lines and block until the user picks one or cancels.

        Returns:
            The selected line exactly as given, or None if cancelled
        """
        pass

    def check(self) -> None:
        """Raise DependencyMissing if the selector cannot run."""
        pass


class FzfSelector(Selector):
    """
    Selector backed by fzf.

    Lines go to fzf on stdin and the choice comes back on stdout; fzf
    draws its UI on the terminal directly.

    Args:
        fzf_path: Path to the fzf executable (default: auto-detect)
        height: Height of the finder, e.g. ``"40%"``
        border: Border style
        layout: Layout direction
        margin: Margins around the finder
        prompt: Prompt label
        header: Header label
        color: Color spec for highlights
        info: Info display style
    """

    def __init__(
        self,
        fzf_path: Optional[str] = None,
        height: str = "40%",
        border: str = "rounded",
        layout: str = "reverse",
        margin: str = "1,2",
        prompt: str = "fav> ",
        header: str = "Select a command",
        color: str = "hl:yellow,hl+:yellow",
        info: str = "inline",
    ):
        if fzf_path:
            self.fzf_path = fzf_path
        else:
            self.fzf_path = shutil.which(FZF_EXECUTABLE)

        self.height = height
        self.border = border
        self.layout = layout
        self.margin = margin
        self.prompt = prompt
        self.header = header
        self.color = color
        self.info = info

    @classmethod
    def from_config(cls, config) -> "FzfSelector":
        """Build a selector from a FavCmdConfig."""
        return cls(
            height=config.fzf_height,
            border=config.fzf_border,
            layout=config.fzf_layout,
            margin=config.fzf_margin,
            prompt=config.fzf_prompt,
            header=config.fzf_header,
            color=config.fzf_color,
            info=config.fzf_info,
        )

    @property
    def available(self) -> bool:
        """Check if fzf was found."""
        return self.fzf_path is not None

    def check(self) -> None:
        if not self.available:
            raise DependencyMissing(
                f"{FZF_EXECUTABLE} is required but was not found on PATH. Install it with:\n"
                f"{install_hint()}"
            )

    def build_args(self) -> List[str]:
        """Command line used to launch fzf."""
        args = [
            self.fzf_path or FZF_EXECUTABLE,
            f"--height={self.height}",
            f"--border={self.border}",
            f"--layout={self.layout}",
            f"--margin={self.margin}",
            f"--prompt={self.prompt}",
            f"--info={self.info}",
        ]
        if self.header:
            args.append(f"--header={self.header}")
        if self.color:
            args.append(f"--color={self.color}")
        return args

    def present(self, lines: Sequence[str]) -> Optional[str]:
        self.check()
        args = self.build_args()
        logger.debug(f"Running {args}")

        result = subprocess.run(
            args,
            input="\n".join(lines) + "\n",
            stdout=subprocess.PIPE,
            text=True,
            encoding="utf-8",
        )

        if result.returncode in (FZF_EXIT_NO_MATCH, FZF_EXIT_INTERRUPTED):
            logger.debug(f"fzf exited with {result.returncode}, no selection")
            return None
        if result.returncode != FZF_EXIT_SELECTED:
            raise SelectorError(f"fzf failed with exit status {result.returncode}")

        selection = result.stdout.rstrip("\r\n")
        return selection or None
