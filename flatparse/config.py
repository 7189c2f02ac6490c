"""
Manifest models and YAML I/O for flatparse.

A manifest (``flatparse.yaml``) names the files a batch run should parse::

    sources:
      servers:
        path: conf/servers.ini
      readings:
        path: data/readings.csv
        encoding: utf-8
      legacy:
        path: data/legacy.dat
        format: csv

Key models:
- SourceConfig: One input file, its optional explicit format and encoding.
- ManifestConfig: Top-level manifest (name -> SourceConfig).

Key functions:
- load_manifest(path) -> ManifestConfig: Load and validate from YAML.
- save_manifest(manifest, path): Serialize to YAML.
- resolve_path(manifest_path, source) -> Path: Resolve a relative source
  path against the manifest's directory.
- validate_source_formats(manifest): Fail fast on sources whose format
  cannot be determined.

Why Pydantic + YAML:
- Pydantic gives strict validation and clear error messages on load.
- YAML is easy to edit by hand.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, model_validator

from flatparse.detect import detect_format
from flatparse.exceptions import ConfigValidationError, UnknownFormatError

logger = logging.getLogger(__name__)

FormatName = Literal["csv", "ini"]


class SourceConfig(BaseModel):
    """A single input file."""

    path: str = Field(..., description="Path to the input file")
    format: FormatName | None = Field(
        None,
        description="Explicit format; detected from the file suffix when omitted",
    )
    encoding: str = Field("utf-8", description="Text encoding of the file")


class ManifestConfig(BaseModel):
    """Top-level manifest: source name -> SourceConfig."""

    sources: dict[str, SourceConfig] = Field(
        default_factory=dict,
        description="Named input files, parsed in declaration order",
    )

    @model_validator(mode="after")
    def _check_sources_not_empty(self) -> ManifestConfig:
        if not self.sources:
            raise ValueError("Manifest must declare at least one source.")
        return self


def load_manifest(path: str | Path) -> ManifestConfig:
    """Load and validate a manifest YAML file.

    Raises:
        FileNotFoundError: If the manifest does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Manifest file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Manifest file is empty: {path}")
    logger.info("Loaded manifest from %s", path)
    return ManifestConfig.model_validate(raw)


def save_manifest(manifest: ManifestConfig, path: str | Path) -> None:
    """Serialize a ManifestConfig to YAML, omitting unset formats."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = manifest.model_dump(mode="json", exclude_none=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# flatparse manifest\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved manifest to %s", path)


def resolve_path(manifest_path: str | Path, source: SourceConfig) -> Path:
    """Resolve *source.path* relative to the manifest's directory.

    Absolute source paths are returned unchanged.
    """
    source_path = Path(source.path)
    if source_path.is_absolute():
        return source_path
    return Path(manifest_path).parent / source_path


def validate_source_formats(manifest: ManifestConfig) -> None:
    """Check that every source has an explicit or detectable format.

    Called before any file is read, so a batch run fails fast instead of
    stopping halfway through the manifest.

    Raises:
        ConfigValidationError: Listing every source whose format is unknown.
    """
    undetectable: list[str] = []
    for name, source in manifest.sources.items():
        if source.format is not None:
            continue
        try:
            detect_format(source.path)
        except UnknownFormatError:
            undetectable.append(f"{name} ({source.path})")

    if undetectable:
        raise ConfigValidationError(
            "Cannot detect the format of these sources; set 'format' explicitly:\n"
            + "\n".join(f"  - {entry}" for entry in undetectable)
        )
