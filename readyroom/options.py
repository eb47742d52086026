"""Options for the ready button."""

import logging
from dataclasses import dataclass
from pathlib import Path

from mashumaro.mixins.json import DataClassJSONMixin

logger = logging.getLogger(__name__)


@dataclass
class ReadyButtonOptions(DataClassJSONMixin):
    """Client options that affect the ready button."""

    locale: str = "en"
    default_tooltip: str = ""  # Shown when there is nothing more specific to say

    @classmethod
    def load(cls, path: str | Path) -> "ReadyButtonOptions":
        """Load options from a JSON file, using defaults if it does not exist."""
        path = Path(path)
        if not path.exists():
            logger.debug("No options file at %s, using defaults", path)
            return cls()
        return cls.from_json(path.read_text(encoding="utf-8"))

    def save(self, path: str | Path) -> None:
        Path(path).write_text(self.to_json(), encoding="utf-8")
