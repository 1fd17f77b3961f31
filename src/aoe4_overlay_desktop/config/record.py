"""Install record manager for the JSON summary of the last install."""

import logging
from pathlib import Path
from typing import cast

import orjson

from aoe4_overlay_desktop.config.paths import Paths
from aoe4_overlay_desktop.constants import (
    INSTALL_RECORD_FILE_NAME,
    INSTALL_RECORD_VERSION,
)
from aoe4_overlay_desktop.types import InstallRecord

logger = logging.getLogger(__name__)

_REQUIRED_KEYS = InstallRecord.__required_keys__


class InstallRecordManager:
    """Reads and writes installed.json."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize install record manager.

        Args:
            config_dir: Configuration directory path
                (defaults to Paths.CONFIG_DIR)

        """
        self.config_dir = config_dir or Paths.CONFIG_DIR
        self.record_file = self.config_dir / INSTALL_RECORD_FILE_NAME

    def load_record(self) -> InstallRecord | None:
        """Load the install record.

        Returns:
            The record, or None when nothing has been installed yet

        Raises:
            ValueError: If the file is unreadable, not valid JSON, or has
                an unexpected version or shape

        """
        if not self.record_file.exists():
            return None

        try:
            with self.record_file.open("rb") as f:
                data = orjson.loads(f.read())
        except orjson.JSONDecodeError as e:
            msg = f"Invalid JSON in install record {self.record_file}: {e}"
            raise ValueError(msg) from e
        except OSError as e:
            msg = f"Failed to load install record {self.record_file}: {e}"
            raise ValueError(msg) from e

        if not isinstance(data, dict):
            msg = f"Install record {self.record_file} is not a JSON object"
            raise ValueError(msg)

        version = data.get("record_version")
        if version != INSTALL_RECORD_VERSION:
            msg = (
                f"Install record is version {version}, "
                f"expected {INSTALL_RECORD_VERSION}"
            )
            raise ValueError(msg)

        missing = sorted(_REQUIRED_KEYS - data.keys())
        if missing:
            msg = f"Install record missing keys: {', '.join(missing)}"
            raise ValueError(msg)

        return cast("InstallRecord", data)

    def save_record(self, record: InstallRecord) -> None:
        """Save the install record.

        Args:
            record: Record to write

        Raises:
            ValueError: If the record cannot be written

        """
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with self.record_file.open("wb") as f:
                f.write(
                    orjson.dumps(
                        record,
                        option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS,
                    )
                )
        except OSError as e:
            msg = f"Failed to save install record {self.record_file}: {e}"
            raise ValueError(msg) from e

        logger.debug("Saved install record: %s", self.record_file)
