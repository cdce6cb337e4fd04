"""
Configuration management for fav-cmd.

Everything fav-cmd keeps lives under one directory,
``<config-root>/fav-cmd/``: the command store (``commands.txt``) and an
optional ``config.toml``.
"""
import os
import tomli
import tomli_w
from pathlib import Path
from typing import Dict, Any, Optional, Mapping, Set
from dataclasses import dataclass, field, fields, asdict

from favcmd.constants import APP_DIR_NAME, CONFIG_FILE_NAME, STORE_FILE_NAME
from favcmd.exceptions import FavCmdError


def get_config_root(environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Resolve the configuration root directory.

    Uses ``$XDG_CONFIG_HOME`` when set, else ``$HOME/.config``, else the
    platform home directory's ``.config``.
    """
    environ = os.environ if environ is None else environ

    xdg = environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg).expanduser()

    home = environ.get("HOME")
    if home:
        return Path(home) / ".config"

    return Path.home() / ".config"


def get_app_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Directory holding the store and config file."""
    return get_config_root(environ) / APP_DIR_NAME


@dataclass
class FavCmdConfig:
    """
    fav-cmd configuration with sensible defaults.

    Configuration hierarchy (highest to lowest priority):
    1. Environment variables (FAVCMD_*)
    2. Config file (<config-root>/fav-cmd/config.toml)
    3. Defaults
    """

    # Store location (empty means <config-root>/fav-cmd/commands.txt)
    store_file: str = field(default="")

    # Editor used by `edit` (empty means $VISUAL / $EDITOR / vi)
    editor: str = field(default="")

    # fzf options
    fzf_height: str = field(default="40%")
    fzf_border: str = field(default="rounded")
    fzf_layout: str = field(default="reverse")
    fzf_margin: str = field(default="1,2")
    fzf_prompt: str = field(default="fav> ")
    fzf_header: str = field(default="Select a command")
    fzf_color: str = field(default="hl:yellow,hl+:yellow")
    fzf_info: str = field(default="inline")

    # Advanced
    log_level: str = field(default="WARNING")

    @classmethod
    def load(
        cls,
        config_file: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "FavCmdConfig":
        """
        Load configuration from the config file and environment.

        Args:
            config_file: Specific config file to load (overrides the default location)
            environ: Environment mapping (defaults to os.environ)

        Returns:
            Merged configuration object
        """
        environ = os.environ if environ is None else environ
        config = cls()

        if config_file is None:
            config_file = get_app_dir(environ) / CONFIG_FILE_NAME
        if config_file.exists():
            config._merge(cls._load_toml(config_file))

        config._apply_env_vars(environ)
        config._expand_paths()
        config._resolve_store_file(environ)

        return config

    @staticmethod
    def _load_toml(path: Path) -> Dict[str, Any]:
        """Load TOML configuration file."""
        with open(path, "rb") as f:
            try:
                return tomli.load(f)
            except tomli.TOMLDecodeError as e:
                raise FavCmdError(f"Invalid config file {path}: {e}")

    @classmethod
    def keys(cls) -> Set[str]:
        """Names of the settings a config file or environment may set."""
        return {f.name for f in fields(cls)}

    def _merge(self, data: Dict[str, Any]):
        """Merge configuration data into this instance."""
        keys = self.keys()
        for key, value in data.items():
            if key in keys:
                setattr(self, key, str(value))

    def _apply_env_vars(self, environ: Mapping[str, str]):
        """Apply environment variables with FAVCMD_ prefix."""
        prefix = "FAVCMD_"
        keys = self.keys()
        for key, value in environ.items():
            if key.startswith(prefix):
                config_key = key[len(prefix):].lower()
                if config_key in keys:
                    setattr(self, config_key, value)

    def _expand_paths(self):
        """Expand ~ and environment variables in paths."""
        if self.store_file:
            self.store_file = os.path.expanduser(os.path.expandvars(self.store_file))

    def _resolve_store_file(self, environ: Mapping[str, str]):
        if not self.store_file:
            self.store_file = str(get_app_dir(environ) / STORE_FILE_NAME)

    def get_store_path(self) -> Path:
        """Get the resolved store path."""
        return Path(self.store_file)

    def to_toml(self) -> str:
        """Render the configuration as TOML."""
        return tomli_w.dumps(asdict(self))


# Global configuration instance
_config: Optional[FavCmdConfig] = None


def get_config(reload: bool = False, config_file: Optional[Path] = None) -> FavCmdConfig:
    """
    Get the global configuration instance.

    Args:
        reload: Force reload configuration from files
        config_file: Specific config file to load

    Returns:
        Global configuration instance
    """
    global _config
    if _config is None or reload:
        _config = FavCmdConfig.load(config_file)
    return _config
