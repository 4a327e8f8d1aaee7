"""Configuration management for pathext."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from pathext.config.paths import default_config_path
from pathext.platform.logging import logger
from pathext.shared.errors import ConfigError


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with metadata marking it for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Library configuration."""

    # Flavor used to split plain strings and bytes: native, posix or windows
    path_flavor: str = "native"

    # Log file path
    log_file: Path | None = _path_field()

    # Console logging level name
    console_level: str = "WARNING"

    _instance: ClassVar[Config | None] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            target: Destination file. Defaults to ``default_config_path()``.

        Returns:
            Path: The file written.
        """
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target if target is not None else default_config_path()
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            _ = destination.write_text(self._render_toml(config_dict), encoding="utf-8")
            logger.info("Configuration saved to %s", destination)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# pathext configuration file")
        lines.append("")

        lines.append("# How plain strings and bytes are split into components")
        lines.append('# One of "native", "posix", "windows"')
        lines.append(f"path_flavor = {self._format_toml_value(config['path_flavor'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/pathext.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Console logging level (DEBUG, INFO, WARNING, ERROR)")
        lines.append(f"console_level = {self._format_toml_value(config['console_level'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> Config:
        """Load configuration from file.

        A missing file yields the defaults; nothing is written on load.

        Args:
            config_file: File to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file exists but is not valid TOML.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        source = config_file if config_file is not None else default_config_path()

        if not source.exists():
            logger.debug("No configuration file at %s, using defaults", source)
            instance = cls()
        else:
            try:
                with open(source, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration from %s: %s", source, e)
                raise ConfigError(f"Invalid configuration file {source}: {e}") from e

            known = {f.name for f in fields(cls)}
            for key in sorted(set(config_dict) - known):
                logger.warning("Ignoring unknown configuration key '%s' in %s", key, source)

            logger.info("Configuration loaded from %s", source)
            instance = cls(**{k: v for k, v in config_dict.items() if k in known})

        cls._instance = instance
        cls._loaded_from = source
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""
        cls._instance = None
        cls._loaded_from = None


# Global configuration instance
config = Config.load()
