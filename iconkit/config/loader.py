"""Load configuration from YAML and environment variables."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from iconkit.render.glyph import GlyphSpec, Palette

# Default config lives next to this module
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "default.yaml"

_HEX_COLOR = re.compile(r"^#?[0-9a-fA-F]{6}$")


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for k, v in override.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    value = value.lstrip("#")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


class TargetSettings(BaseModel):
    filename: str
    size: int = Field(gt=0)


class IconSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ICONKIT_", extra="ignore")
    output_dir: str = "assets/icons"
    compression_level: int = Field(default=9, ge=0, le=9)
    ico_name: str = "favicon.ico"
    ico_sizes: list[int] = Field(default_factory=lambda: [16, 32])
    targets: list[TargetSettings] = Field(
        default_factory=lambda: [
            TargetSettings(filename="favicon-16.png", size=16),
            TargetSettings(filename="favicon-32.png", size=32),
            TargetSettings(filename="apple-touch-icon.png", size=180),
        ]
    )

    @field_validator("ico_sizes")
    @classmethod
    def _check_ico_sizes(cls, v: list[int]) -> list[int]:
        bad = [s for s in v if not 1 <= s <= 256]
        if bad:
            raise ValueError(f"ICO sizes must be 1..256: {bad}")
        return v


class PaletteSettings(BaseSettings):
    """Colors as #rrggbb strings."""

    model_config = SettingsConfigDict(env_prefix="PALETTE_", extra="ignore")
    top: str = "#0b1220"
    bottom: str = "#111827"
    ink: str = "#e2e8f0"
    accent: str = "#14b8a6"

    @field_validator("top", "bottom", "ink", "accent")
    @classmethod
    def _check_hex(cls, v: str) -> str:
        if not _HEX_COLOR.match(v):
            raise ValueError(f"expected #rrggbb color, got {v!r}")
        return v

    def to_palette(self) -> Palette:
        return Palette(
            top=hex_to_rgb(self.top),
            bottom=hex_to_rgb(self.bottom),
            ink=hex_to_rgb(self.ink),
            accent=hex_to_rgb(self.accent),
        )


class LogSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LOG_", extra="ignore")
    level: str = "INFO"
    use_json: bool = True


class Config(BaseSettings):
    """Generator config: YAML + env."""

    model_config = SettingsConfigDict(env_nested_delimiter="__", extra="ignore")

    icons: IconSettings = Field(default_factory=IconSettings)
    palette: PaletteSettings = Field(default_factory=PaletteSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    def glyph(self) -> GlyphSpec:
        return GlyphSpec(palette=self.palette.to_palette())

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> "Config":
        path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH
        yaml_data = _load_yaml(path)
        env_prefix = os.getenv("ICONKIT_ENV_PREFIX", "")
        if env_prefix:
            yaml_data = _deep_merge(yaml_data, _load_yaml(Path(f"config/{env_prefix}.yaml")))
        output_dir = os.getenv("ICONKIT_OUTPUT_DIR")
        if output_dir:
            yaml_data.setdefault("icons", {})["output_dir"] = output_dir
        level = os.getenv("LOG_LEVEL")
        if level:
            yaml_data.setdefault("log", {})["level"] = level
        return cls(**yaml_data)


def get_config(config_path: str | Path | None = None) -> Config:
    return Config.load(config_path)
