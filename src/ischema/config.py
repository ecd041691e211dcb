"""Project configuration (``ischema.json``)."""

from __future__ import annotations

import json as stdjson
from pathlib import Path
from typing import Any

import ujson as json
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .compiler import IndexEncoding
from .errors import ConfigError
from .extract import END_MARKER, START_MARKER, Markers

CONFIG_NAMES = ("ischema.json", "ischema.yaml", "ischema.yml")


class MarkersConfig(BaseModel):
    """Marker lines that open and close a schema block."""

    start: str = Field(default=START_MARKER, min_length=1)
    end: str = Field(default=END_MARKER, min_length=1)

    def to_markers(self) -> Markers:
        return Markers(start=self.start, end=self.end)


class OptionsConfig(BaseModel):
    root_dir: str = Field(default=".", alias="rootDir")
    out_dir: str = Field(default=".", alias="outDir")
    extensions: list[str] = Field(default_factory=lambda: [".ts"])
    markers: MarkersConfig = Field(default_factory=MarkersConfig)
    index_encoding: IndexEncoding = Field(default="legacy", alias="indexEncoding")

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, value: list[str]) -> list[str]:
        out = []
        for ext in value:
            ext = ext.strip()
            if not ext:
                continue
            out.append(ext if ext.startswith(".") else f".{ext}")
        if not out:
            raise ValueError("extensions must name at least one file suffix")
        return out


class IschemaConfig(BaseModel):
    """Top-level config file layout: ``{"options": {...}}``."""

    options: OptionsConfig = Field(default_factory=OptionsConfig)

    def resolve(self, root: str | Path) -> ResolvedConfig:
        """Anchor relative directories at ``root``."""
        root = Path(root)
        opts = self.options
        return ResolvedConfig(
            root_dir=_anchor(root, opts.root_dir),
            out_dir=_anchor(root, opts.out_dir),
            extensions=list(opts.extensions),
            markers=opts.markers.to_markers(),
            index_encoding=opts.index_encoding,
        )


class ResolvedConfig(BaseModel):
    """Config with absolute directories, ready for a build."""

    root_dir: Path
    out_dir: Path
    extensions: list[str]
    markers: Markers
    index_encoding: IndexEncoding = "legacy"


def _anchor(root: Path, value: str) -> Path:
    path = Path(value)
    return path if path.is_absolute() else root / path


def find_config(root: str | Path) -> Path | None:
    """Return the first config file present in ``root``, if any."""
    root = Path(root)
    for name in CONFIG_NAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def load_config_file(path: str | Path) -> IschemaConfig:
    """Load a config from YAML or JSON."""
    path = Path(path)
    text = path.read_text()
    data: Any
    try:
        if path.suffix in {".yaml", ".yml"}:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise ConfigError(f"Could not parse config {path}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain an object")
    try:
        return IschemaConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {path}") from exc


def load_config(root: str | Path) -> ResolvedConfig:
    """Load the config for the project at ``root``.

    Without a config file both directories default to ``root`` itself.
    """
    path = find_config(root)
    config = load_config_file(path) if path is not None else IschemaConfig()
    return config.resolve(root)


def default_config() -> dict[str, Any]:
    return {"options": {"rootDir": ".", "outDir": "./schemas"}}


def init_config(root: str | Path) -> Path:
    """Write a default ``ischema.json`` into ``root``."""
    path = Path(root) / CONFIG_NAMES[0]
    path.write_text(stdjson.dumps(default_config(), indent="\t"))
    return path
