"""Configuration management for U-King Mod Manager."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class Config:
    """Manage application configuration."""

    CONFIG_DIR = Path.home() / ".uking_mod_manager"
    CONFIG_FILE_NAME = "config.json"

    # Default configuration
    DEFAULTS = {
        "api_url": "http://127.0.0.1:6776",
        "request_timeout": 10,
        "log_level": "INFO",
        "log_poll_interval_ms": 100,
        "geometry": "1100x750",
    }

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            config_dir: Directory holding config.json, defaults to ~/.uking_mod_manager
        """
        self.config_dir = Path(config_dir) if config_dir else self.CONFIG_DIR
        self.config_file = self.config_dir / self.CONFIG_FILE_NAME
        self.data: Dict[str, Any] = self.DEFAULTS.copy()
        self.load()

    @property
    def log_dir(self) -> Path:
        return self.config_dir / "logs"

    def load(self) -> None:
        """Load configuration from file."""
        if self.config_file.exists():
            try:
                with open(self.config_file, "r") as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError("top level must be an object")
                self.data.update(loaded)
            except (OSError, ValueError) as e:
                logger.warning(f"Error loading config: {e}. Using defaults.")

    def save(self) -> None:
        """Save configuration to file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Get configuration value."""
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set configuration value."""
        self.data[key] = value
        self.save()
