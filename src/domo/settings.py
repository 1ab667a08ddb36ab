"""Store settings model and its settings file."""

import logging
import shutil
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from domo.exceptions import ConfigFileInvalidError, wrap_pydantic_error

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / ".domo" / "settings.json"


class DomoSettings(BaseModel):
    """
    Behavioural settings shared by repositories and the repository manager.

    Settings are read once, when a repository or manager is created. The file
    is plain JSON of this model; a missing file means defaults, while an empty
    or malformed one is an error so it is never overwritten by accident.
    """

    model_config = ConfigDict(frozen=True)

    observer_errors: Literal["log", "raise"] = Field(
        default="log",
        description=(
            "What happens when an observer callback raises: 'log' records the "
            "traceback and keeps notifying the remaining observers, 'raise' "
            "propagates the first failure to the caller that made the change. "
            "The change is already stored by then, and a failing model "
            "observer does not stop the repository's UPDATED event."
        ),
    )
    log_changes: bool = Field(
        default=False,
        description="Log every change event at INFO level instead of DEBUG",
    )

    @classmethod
    def load(cls, path: Path) -> "DomoSettings":
        """
        Read settings from `path`.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the file is empty, unreadable or not JSON
            ConfigValidationError: If settings values fail validation
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigFileInvalidError(str(path), f"Cannot read file: {e}") from e

        if not text.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            settings = cls.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"Invalid settings file {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded settings from {path}")
        return settings

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "DomoSettings":
        """
        Load settings from file or return defaults.

        Args:
            path: Path to settings file. If None, uses ~/.domo/settings.json.

        Raises:
            ConfigFileInvalidError: If the file has invalid JSON syntax
            ConfigValidationError: If settings values fail validation
        """
        path = path or DEFAULT_SETTINGS_PATH
        try:
            return cls.load(path)
        except FileNotFoundError:
            logger.info(f"No settings file at {path}, using defaults")
            return cls()

    def save(self, path: Path | None = None) -> Path:
        """
        Write settings to `path`, keeping the previous file as `<name>.bak`.

        The JSON goes to `<name>.tmp` first and is then renamed over the
        target, so a failed write leaves the old file intact.

        Returns:
            The path written
        """
        path = path or DEFAULT_SETTINGS_PATH
        path.parent.mkdir(parents=True, exist_ok=True)

        if path.exists():
            shutil.copy2(path, path.with_name(path.name + ".bak"))

        staging = path.with_name(path.name + ".tmp")
        try:
            staging.write_text(self.model_dump_json(indent=2) + "\n", encoding="utf-8")
            staging.replace(path)
        finally:
            staging.unlink(missing_ok=True)

        logger.debug(f"Saved settings to {path}")
        return path
