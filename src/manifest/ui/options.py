"""Editor options and their JSON-backed store.

Options are independent of charts: a missing or malformed options file never
stops the editor, it just falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

_LOGGER = logging.getLogger(__name__)

OPTIONS_FILE_NAME = "config.json"


@dataclass
class Options:
    """All user-configurable options."""

    dark_theme: bool = True
    executable_path: str = ""  # game executable used to preview charts


def default_options_path() -> Path:
    """Per-user config file inside Qt's application config directory."""
    from PyQt6.QtCore import QStandardPaths

    config_dir = QStandardPaths.writableLocation(
        QStandardPaths.StandardLocation.AppConfigLocation
    )
    return Path(config_dir) / OPTIONS_FILE_NAME


class OptionsStore:
    """Loads and saves :class:`Options` as JSON at a fixed path."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> Options:
        if not self.path.is_file():
            return Options()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            _LOGGER.warning("Could not read options from %s: %s", self.path, exc)
            return Options()
        if not isinstance(data, dict):
            _LOGGER.warning("Ignoring options file %s: not a JSON object", self.path)
            return Options()

        options = Options()
        for f in fields(Options):
            if f.name not in data:
                continue
            value = data[f.name]
            expected = type(getattr(options, f.name))
            if not isinstance(value, expected):
                _LOGGER.warning(
                    "Ignoring option %s=%r: expected %s",
                    f.name,
                    value,
                    expected.__name__,
                )
                continue
            setattr(options, f.name, value)
        return options

    def save(self, options: Options) -> None:
        """Write *options*; ``OSError`` propagates to the caller."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(asdict(options), indent=4), encoding="utf-8")
        _LOGGER.debug("Saved options to %s", self.path)
