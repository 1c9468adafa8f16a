"""Loading of shift picker options from JSON files.

Example file::

    {
      "timezone": "Europe/Warsaw",
      "displayMode": "buttons",
      "shifts": [
        {"name": "Morning", "start": "06:00", "end": "14:00"},
        {"name": "Night", "start": "22:00", "end": "06:00", "dateOffset": -1}
      ]
    }
"""

import json
import logging
from pathlib import Path
from typing import Union

from shiftrange.domain.errors import ConfigError
from shiftrange.domain.models import PanelOptions

logger = logging.getLogger(__name__)


def load_options(path: Union[str, Path]) -> PanelOptions:
    """Read panel options from a JSON file.

    Raises:
        ConfigError: If the file is missing, unreadable, or not an options object.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Options file not found: {path}")
    except OSError as exc:
        raise ConfigError(f"Cannot read options file {path}: {exc}")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Options file {path} is not valid JSON: {exc}")

    if not isinstance(data, dict):
        raise ConfigError(f"Options file {path} must contain a JSON object")

    options = PanelOptions.from_dict(data)
    logger.info("Loaded %d shift(s) from %s (timezone %s)", len(options.shifts), path, options.timezone)
    return options
