"""Configuration for the firmware workspace directory and the git search path"""

import configparser
import os
import platform
from typing import List, Optional, Any

from pathlib import Path

APP_NAME = "firmware_fetch"

FIRMWARE_DIR_ENV = "FIRMWARE_FETCH_DIR"

_home = os.path.expanduser("~")

xdg_config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(_home, ".config")
xdg_cache_home = os.environ.get("XDG_CACHE_HOME") or os.path.join(_home, ".cache")


default_cfg = {"dirs": {"firmware": os.path.join(xdg_cache_home, APP_NAME, "firmware")}}

if platform.system() == "Darwin":
    # macOS
    config_dir = Path("~/Library/Application Support/firmware_fetch").expanduser()
else:
    # Linux or others
    config_dir = Path(os.path.join(xdg_config_home, APP_NAME))


def get_config_file():
    return config_dir / f"{APP_NAME}.cfg"


class ConfigAccessor:
    """
    A dict-like accessor for configuration files.

    Missing files, sections and keys are not errors; ``get`` falls back to the
    given default.

    Usage:
        config = ConfigAccessor()
        value = config.get('dirs', 'firmware', default='~/firmware')
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize a ConfigAccessor with an optional config file path.

        Args:
            config_path: Path to the configuration file. If None, uses the default path.
        """
        if config_path is None:
            self.config_path = get_config_file()
        else:
            self.config_path = config_path

        self.config = configparser.ConfigParser()
        if self.config_path.exists():
            self.config.read(self.config_path)

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from the specified section and key.

        Args:
            section: The configuration section
            key: The configuration key
            default: Value to return if the section or key doesn't exist

        Returns:
            The configuration value if it exists, otherwise the default value
        """
        try:
            return self.config[section][key]
        except (KeyError, configparser.NoSectionError, configparser.NoOptionError):
            return default


# Create a global config accessor instance
config = ConfigAccessor()


def get_firmware_dir() -> Path:
    """
    Get the base directory that holds one checkout per firmware repository.

    Resolution order: the FIRMWARE_FETCH_DIR environment variable, the
    ``[dirs] firmware`` config key, then ``$XDG_CACHE_HOME/firmware_fetch/firmware``.

    Returns:
        Absolute path to the firmware directory (created if missing)
    """
    firmware_dir_str = os.environ.get(FIRMWARE_DIR_ENV) or config.get(
        "dirs", "firmware", default_cfg["dirs"]["firmware"]
    )
    firmware_dir = Path(firmware_dir_str).expanduser().resolve()

    firmware_dir.mkdir(parents=True, exist_ok=True)

    return firmware_dir


def split_search_path(value: str) -> List[str]:
    """Split a PATH-style string on the platform separator, dropping empty entries."""
    return [entry for entry in value.split(os.pathsep) if entry.strip()]


def get_git_search_path() -> List[str]:
    """
    Get the directories searched for a git executable.

    The ``[git] search_path`` config key takes precedence over the PATH
    environment variable.
    """
    search_path = config.get("git", "search_path", None)
    if search_path is None:
        search_path = os.environ.get("PATH", "")
    return split_search_path(search_path)
