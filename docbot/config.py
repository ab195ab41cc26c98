"""
Configuration — Centralized settings management

Config hierarchy (highest to lowest priority):
  1. Environment variables
  2. Project config (.docbot/config.yaml)
  3. User config (~/.docbot/config.yaml)
  4. Defaults
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Dict, Any

import yaml

from .chat.splitting import DEFAULT_MAX_LENGTH
from .tracking.choices import DEFAULT_CHOICE_TIMEOUT


logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class ChatConfig:
    """Chat surface settings."""
    trigger: str = "="
    max_message_length: int = DEFAULT_MAX_LENGTH

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if not self.trigger or any(c.isspace() for c in self.trigger):
            return f"Invalid trigger '{self.trigger}'. Use a non-empty prefix without spaces"
        if self.max_message_length < 1:
            return f"max_message_length must be positive, got {self.max_message_length}"
        return None


@dataclass
class JavadocConfig:
    """Documentation lookup settings."""
    archive_dir: str = "javadocs"
    choice_timeout: float = DEFAULT_CHOICE_TIMEOUT
    suggestions: int = 3  # "did you mean" names for unknown classes

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if self.choice_timeout <= 0:
            return f"choice_timeout must be positive, got {self.choice_timeout}"
        if self.suggestions < 0:
            return f"suggestions cannot be negative, got {self.suggestions}"
        return None


@dataclass
class LoggingConfig:
    """Logging preferences."""
    level: str = "WARNING"

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if self.level.upper() not in LOG_LEVELS:
            return f"Unknown log level '{self.level}'. Valid: {', '.join(LOG_LEVELS)}"
        return None


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    """A config section as a mapping; empty or scalar sections count as unset."""
    value = data.get(name)
    return value if isinstance(value, dict) else {}


@dataclass
class Config:
    """Application configuration."""
    chat: ChatConfig = field(default_factory=ChatConfig)
    javadoc: JavadocConfig = field(default_factory=JavadocConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "chat": {
                "trigger": self.chat.trigger,
                "max_message_length": self.chat.max_message_length
            },
            "javadoc": {
                "archive_dir": self.javadoc.archive_dir,
                "choice_timeout": self.javadoc.choice_timeout,
                "suggestions": self.javadoc.suggestions
            },
            "logging": {
                "level": self.logging.level
            }
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create from dictionary."""
        chat_data = _section(data, "chat")
        javadoc_data = _section(data, "javadoc")
        logging_data = _section(data, "logging")

        return cls(
            chat=ChatConfig(
                trigger=str(chat_data.get("trigger", "=")),
                max_message_length=int(chat_data.get("max_message_length", DEFAULT_MAX_LENGTH))
            ),
            javadoc=JavadocConfig(
                archive_dir=str(javadoc_data.get("archive_dir", "javadocs")),
                choice_timeout=float(javadoc_data.get("choice_timeout", DEFAULT_CHOICE_TIMEOUT)),
                suggestions=int(javadoc_data.get("suggestions", 3))
            ),
            logging=LoggingConfig(
                level=str(logging_data.get("level", "WARNING"))
            )
        )

    def validate(self) -> Optional[str]:
        """First validation error of any section, or None."""
        for section in (self.chat, self.javadoc, self.logging):
            error = section.validate()
            if error:
                return error
        return None


class ConfigManager:
    """
    Manages configuration loading and persistence.

    Hierarchy:
      1. Environment (DOCBOT_*)
      2. Project config (.docbot/config.yaml)
      3. User config (~/.docbot/config.yaml)
      4. Defaults
    """

    USER_CONFIG_DIR = Path.home() / ".docbot"
    PROJECT_CONFIG_DIR = ".docbot"
    CONFIG_FILE = "config.yaml"

    # Environment variable -> (section, setting)
    ENV_OVERRIDES = {
        "DOCBOT_TRIGGER": ("chat", "trigger"),
        "DOCBOT_ARCHIVE_DIR": ("javadoc", "archive_dir"),
        "DOCBOT_CHOICE_TIMEOUT": ("javadoc", "choice_timeout"),
        "DOCBOT_LOG_LEVEL": ("logging", "level"),
    }

    def __init__(self, project_dir: Optional[Path] = None):
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self._config: Optional[Config] = None

    @property
    def project_config_path(self) -> Path:
        return self.project_dir / self.PROJECT_CONFIG_DIR / self.CONFIG_FILE

    @property
    def user_config_path(self) -> Path:
        return self.USER_CONFIG_DIR / self.CONFIG_FILE

    def load(self) -> Config:
        """Load configuration from all sources."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}

        # Layer 1: User config
        config_data = self._merge(config_data, self._read(self.user_config_path))

        # Layer 2: Project config (higher priority)
        config_data = self._merge(config_data, self._read(self.project_config_path))

        # Layer 3: Environment overrides
        for env_key, (section, setting) in self.ENV_OVERRIDES.items():
            if os.environ.get(env_key):
                config_data[section] = _section(config_data, section)
                config_data[section][setting] = os.environ[env_key]

        try:
            config = Config.from_dict(config_data)
        except (TypeError, ValueError) as e:
            logger.warning("Invalid configuration value (%s), using defaults", e)
            config = Config()

        # An invalid section falls back to its defaults, the others are kept
        defaults = Config()
        for name in ("chat", "javadoc", "logging"):
            error = getattr(config, name).validate()
            if error:
                logger.warning("Invalid %s config (%s), using defaults", name, error)
                setattr(config, name, getattr(defaults, name))

        self._config = config
        return self._config

    def _read(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring malformed config %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: not a mapping", path)
            return {}
        return data

    def save_project(self, config: Config):
        """Save configuration to project config file."""
        self._write(self.project_config_path, config)

    def save_user(self, config: Config):
        """Save configuration to user config file."""
        self._write(self.user_config_path, config)

    def _write(self, path: Path, config: Config):
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False)
        self._config = config

    def set(self, key: str, value: str, scope: str = "project") -> Optional[str]:
        """
        Set a configuration value.

        Args:
            key: Dot-separated key (e.g., "javadoc.choice_timeout")
            value: Value to set
            scope: "project" or "user"

        Returns:
            Error message or None if successful
        """
        config = self.load()

        parts = key.split(".")
        if len(parts) != 2:
            return f"Invalid key format: {key}. Use 'section.setting' (e.g., 'chat.trigger')"

        section, setting = parts
        data = config.to_dict()

        if section not in data:
            return f"Unknown section: {section}. Valid: {', '.join(data)}"
        if setting not in data[section]:
            valid = ", ".join(data[section])
            return f"Unknown {section} setting: {setting}. Valid: {valid}"

        data[section][setting] = value
        try:
            updated = Config.from_dict(data)
        except (TypeError, ValueError):
            return f"Invalid value for {key}: {value}"

        error = updated.validate()
        if error:
            return error

        if scope == "project":
            self.save_project(updated)
        else:
            self.save_user(updated)

        return None

    def get(self, key: str) -> Optional[str]:
        """Get a configuration value."""
        parts = key.split(".")
        if len(parts) != 2:
            return None

        section, setting = parts
        value = self.load().to_dict().get(section, {}).get(setting)
        return None if value is None else str(value)

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts, override wins."""
        result = base.copy()
        for key, value in override.items():
            if value is None:
                continue
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result

    def display(self) -> str:
        """Format config for display."""
        config = self.load()
        lines = [
            "Configuration:",
            "",
            "Chat:",
            f"  Trigger: {config.chat.trigger}",
            f"  Max message length: {config.chat.max_message_length}",
            "",
            "Javadoc:",
            f"  Archive dir: {config.javadoc.archive_dir}",
            f"  Choice timeout: {config.javadoc.choice_timeout}s",
            f"  Suggestions: {config.javadoc.suggestions}",
            "",
            "Logging:",
            f"  Level: {config.logging.level}",
            "",
            "Config files:",
            f"  User: {self.user_config_path}",
            f"  Project: {self.project_config_path}",
        ]
        return "\n".join(lines)


def configure_logging(level: str = "WARNING"):
    """Attach a stream handler to the docbot logger (idempotent)."""
    root_logger = logging.getLogger("docbot")
    root_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)


# Convenience function
def get_config(project_dir: Optional[Path] = None) -> Config:
    """Load configuration for a project."""
    return ConfigManager(project_dir).load()
