"""Configuration persistence manager for the pic2string generator.

This module handles loading and saving of run settings to/from JSON files.
"""

import json
from dataclasses import asdict, fields
from pathlib import Path
from typing import Optional, Tuple

from models import CONFIG_FILE, StringArtConfig


class ConfigManager:
    """Handles loading and saving of string art settings."""

    def __init__(self, config_path: Path = CONFIG_FILE, verbose: bool = True):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.pic2string_config.json)
            verbose: Print a status line after a successful load
        """
        self.config_path = config_path
        self.verbose = verbose

    def load(self) -> StringArtConfig:
        """Load configuration from file, returning defaults if not found.

        Returns:
            StringArtConfig with loaded or default values
        """
        config = StringArtConfig()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                    # Update config with loaded values (fallback to defaults)
                    for setting in fields(StringArtConfig):
                        if setting.name not in data:
                            continue
                        value = data[setting.name]
                        if not StringArtConfig.accepts(setting.name, value):
                            print(
                                f"Warning: Ignoring invalid value for "
                                f"'{setting.name}': {value!r}"
                            )
                            continue
                        setattr(config, setting.name, value)
                if self.verbose:
                    print(f"✓ Loaded configuration from {self.config_path}")
        except Exception as e:
            print(f"Warning: Could not load config file: {e}")
            config = StringArtConfig()

        return config

    def save(self, config: StringArtConfig) -> Tuple[bool, Optional[str]]:
        """Save configuration to file.

        Args:
            config: StringArtConfig to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        try:
            with open(self.config_path, "w") as f:
                json.dump(asdict(config), f, indent=2)
            return True, None
        except Exception as e:
            return False, str(e)
