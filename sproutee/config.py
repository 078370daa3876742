"""Configuration handling for sproutee"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from sproutee.constants import CONFIG_FILE_NAME, EDITOR_NAMES
from sproutee.exceptions import ConfigError, ConfigNotFoundError
from sproutee.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class Config:
    """Runtime options for a single sproutee invocation."""

    # Clean workflow
    dry_run: bool = False
    force: bool = False

    # Output
    verbose: bool = False
    debug: bool = False

    # Create workflow
    editor: Optional[str] = None  # One of EDITOR_NAMES, None = don't open
    target_dir: Optional[str] = None  # Directory to open, relative to the worktree or absolute

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_editor()
        self._validate_target_dir()

    def _validate_editor(self):
        """Validate editor is one of the supported editors."""
        if self.editor is not None and self.editor not in EDITOR_NAMES:
            allowed = sorted(EDITOR_NAMES)
            raise ValueError(f"editor must be one of {allowed}, got '{self.editor}'")

    def _validate_target_dir(self):
        """Normalize an empty target_dir to None."""
        if self.target_dir is not None and not self.target_dir.strip():
            self.target_dir = None

    def to_dict(self) -> dict:
        return {
            "dry_run": self.dry_run,
            "force": self.force,
            "verbose": self.verbose,
            "debug": self.debug,
            "editor": self.editor,
            "target_dir": self.target_dir,
        }


@dataclass
class CopyConfig:
    """Contents of ``sproutee.json``: files copied into every new worktree."""

    copy_files: Optional[List[str]] = field(default_factory=list)

    def validate(self) -> None:
        if self.copy_files is None:
            raise ConfigError("copy_files field is required")
        if not isinstance(self.copy_files, list):
            raise ConfigError("copy_files must be a list of paths")
        for entry in self.copy_files:
            if not isinstance(entry, str) or not entry.strip():
                raise ConfigError(f"copy_files entries must be non-empty strings, got {entry!r}")

    def to_dict(self) -> dict:
        return {"copy_files": self.copy_files}

    @classmethod
    def from_dict(cls, config_dict: dict) -> "CopyConfig":
        """Create CopyConfig from dictionary, ignoring unknown keys."""
        if not isinstance(config_dict, dict):
            raise ConfigError("configuration must be a JSON object")
        return cls(copy_files=config_dict.get("copy_files"))


def find_config_file(start_dir: Union[str, Path, None] = None) -> Path:
    """Walk upward from start_dir until a sproutee.json is found.

    Raises:
        ConfigNotFoundError: If the filesystem root is reached first
    """
    current = Path(start_dir if start_dir is not None else os.getcwd()).absolute()
    while True:
        candidate = current / CONFIG_FILE_NAME
        if candidate.exists():
            logger.debug(f"Using configuration file {candidate}")
            return candidate
        if current.parent == current:
            break
        current = current.parent

    raise ConfigNotFoundError(CONFIG_FILE_NAME)


def load_config(config_path: Union[str, Path]) -> CopyConfig:
    """Read, parse and validate a configuration file."""
    try:
        data = Path(config_path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"failed to read config file {config_path}: {e}") from e

    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise ConfigError(f"failed to parse config file {config_path}: {e}") from e

    config = CopyConfig.from_dict(raw)
    try:
        config.validate()
    except ConfigError as e:
        raise ConfigError(f"invalid configuration in {config_path}: {e}") from e
    return config


def load_config_from_dir(start_dir: Union[str, Path, None] = None) -> CopyConfig:
    """Locate and load the nearest configuration file."""
    return load_config(find_config_file(start_dir))


def save_config(config: CopyConfig, config_path: Union[str, Path]) -> None:
    """Validate and write a configuration file (owner read/write only)."""
    try:
        config.validate()
    except ConfigError as e:
        raise ConfigError(f"invalid configuration: {e}") from e

    path = Path(config_path)
    try:
        path.write_text(json.dumps(config.to_dict(), indent=2) + "\n", encoding="utf-8")
        os.chmod(path, 0o600)
    except OSError as e:
        raise ConfigError(f"failed to write config file {path}: {e}") from e
    logger.info(f"Wrote configuration file {path}")


def create_default_config_file(config_path: Union[str, Path]) -> None:
    """Create an empty configuration; refuses to overwrite an existing file."""
    if Path(config_path).exists():
        raise ConfigError(f"configuration file already exists: {config_path}")
    save_config(CopyConfig(), config_path)
