"""Configuration management for musicmeta."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from musicmeta.config.file_ops import write_text_file
from musicmeta.config.paths import default_config_path
from musicmeta.platform.logging import logger

HTTP_TIMEOUT_DEFAULT: float = 15.0


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Parse defaults
    merge_tag_headers: bool = False
    include_native: bool = False
    skip_covers: bool = False

    # Remote sources
    http_timeout: float = HTTP_TIMEOUT_DEFAULT

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            path: Destination; defaults to the configured config location.

        Returns:
            Path: File that was written.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# musicmeta configuration file")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/musicmeta.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Populate common tags from every tag header, not only the highest priority one")
        lines.append(f"merge_tag_headers = {self._format_toml_value(config['merge_tag_headers'])}")
        lines.append("")

        lines.append("# Include native tags in parse results")
        lines.append(f"include_native = {self._format_toml_value(config['include_native'])}")
        lines.append("")

        lines.append("# Skip decoding embedded cover art")
        lines.append(f"skip_covers = {self._format_toml_value(config['skip_covers'])}")
        lines.append("")

        lines.append("# Timeout in seconds for remote (http/https) sources")
        lines.append(f"http_timeout = {self._format_toml_value(config['http_timeout'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults without writing anything.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        if not config_file.exists():
            logger.debug("No configuration at %s, using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            values = {key: value for key, value in config_dict.items() if key in known}

            if isinstance(values.get("log_file"), str) and not values["log_file"].strip():
                values["log_file"] = None

            logger.info("Configuration loaded from %s", config_file)
            instance = cls(**values)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""
        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "HTTP_TIMEOUT_DEFAULT"]
