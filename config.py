"""
Configuration loader for the SRT Overlay Sequencer.
Loads from config.yaml and allows CLI argument overrides.
"""

import yaml
import logging
from pathlib import Path
from dataclasses import dataclass, field, replace
from typing import Optional

from overlay.style import StyleParameters

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"

_STYLE_ARGS = (
    "font_size",
    "text_color",
    "outline_width",
    "outline_color",
    "container_width",
)


@dataclass
class SourceConfig:
    subtitle_file: Optional[str] = None


@dataclass
class PlaybackConfig:
    speed: float = 1.0
    preview_entries: int = 10


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class AppConfig:
    """Top-level application configuration."""
    source: SourceConfig = field(default_factory=SourceConfig)
    style: StyleParameters = field(default_factory=StyleParameters)
    playback: PlaybackConfig = field(default_factory=PlaybackConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def update_from_args(self, args):
        """Override config values from CLI arguments."""
        if getattr(args, "subtitle_file", None):
            self.source.subtitle_file = str(args.subtitle_file)

        overrides = {
            name: getattr(args, name)
            for name in _STYLE_ARGS
            if getattr(args, name, None) is not None
        }
        if getattr(args, "outline", None) is not None:
            overrides["outline"] = args.outline
        if overrides:
            # StyleParameters is frozen for the run
            self.style = replace(self.style, **overrides)

        if getattr(args, "speed", None):
            self.playback.speed = args.speed


def _dict_to_dataclass(cls, data: dict):
    """Recursively convert a dict to a dataclass, ignoring unknown keys."""
    if data is None:
        return cls()
    field_names = {f.name for f in cls.__dataclass_fields__.values()}
    filtered = {k: v for k, v in data.items() if k in field_names}
    return cls(**filtered)


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load configuration from a YAML file.
    Falls back to defaults if file is missing.
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    if not path.exists():
        logger.warning(f"Config file not found at {path}, using defaults.")
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    config = AppConfig(
        source=_dict_to_dataclass(SourceConfig, raw.get("source")),
        style=_dict_to_dataclass(StyleParameters, raw.get("style")),
        playback=_dict_to_dataclass(PlaybackConfig, raw.get("playback")),
        logging=_dict_to_dataclass(LoggingConfig, raw.get("logging")),
    )

    logger.info(f"Configuration loaded from {path}")
    return config
