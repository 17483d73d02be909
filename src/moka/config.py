from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, field_validator


class RunConfig(BaseModel):
    """Options for a single run of a test tree."""

    model_config = ConfigDict(extra="forbid")
    color: bool = True
    verbose: bool = False
    debug_log: str | None = None
    strict: bool = True

    @field_validator("debug_log")
    @classmethod
    def debug_log_must_not_be_blank(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("debug_log must not be blank")
        return v


def load_config(path: Path) -> RunConfig:
    """Load and validate a run config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    config = RunConfig(**raw)

    # Resolve a relative debug log path relative to the config file location
    if config.debug_log is not None:
        debug_path = Path(config.debug_log)
        if not debug_path.is_absolute():
            config.debug_log = str((config_dir / debug_path).resolve())

    return config
