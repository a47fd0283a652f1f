"""Configuration management for slug-studio."""

import json
from pathlib import Path

from slug_studio.models import Config, DocumentType, Language


def _positive_int(value, fallback: int) -> int:
    """Return value as an int, or fallback when missing or below 1."""
    if value is None:
        return fallback
    number = int(value)
    return number if number >= 1 else fallback


class ConfigManager:
    """Manages application configuration persistence."""

    CONFIG_PATH = Path.home() / ".config" / "slug-studio" / "config.json"

    def __init__(self, config_path: Path | None = None):
        """Initialize ConfigManager with optional custom path."""
        self.config_path = config_path or self.CONFIG_PATH

    def load(self) -> Config:
        """Load configuration from file, returning defaults if not found."""
        if not self.config_path.exists():
            return Config.default()

        default = Config.default()
        try:
            with open(self.config_path, "r") as f:
                data = json.load(f)
            return Config(
                site_url=data.get("site_url") or default.site_url,
                language=Language(data.get("language", default.language.value)),
                document_type=DocumentType(
                    data.get("document_type", default.document_type.value)
                ),
                auto_generate=data.get("auto_generate", default.auto_generate),
                max_length=_positive_int(data.get("max_length"), default.max_length),
            )
        except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError):
            return default

    def save(self, config: Config) -> None:
        """Save configuration to file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "site_url": config.site_url,
            "language": config.language.value,
            "document_type": config.document_type.value,
            "auto_generate": config.auto_generate,
            "max_length": config.max_length,
        }

        with open(self.config_path, "w") as f:
            json.dump(data, f, indent=2)
