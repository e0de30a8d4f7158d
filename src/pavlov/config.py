from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator


class PavlovConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    on_collision: Literal["error", "replace"] = "error"
    debug_log: str | None = None
    verbose: bool = False

    @field_validator("debug_log")
    @classmethod
    def debug_log_must_not_be_blank(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("debug_log must not be blank")
        return v


def _expand(raw: Any) -> Any:
    """Expand ``${VAR}`` references in every string value.

    Raises ValueError naming the variable when it is unset and has no default.
    """
    if isinstance(raw, str):
        try:
            return expandvars(raw, nounset=True)
        except Exception as exc:
            raise ValueError(f"Missing environment variable in '{raw}': {exc}") from exc
    if isinstance(raw, dict):
        return {k: _expand(v) for k, v in raw.items()}
    if isinstance(raw, list):
        return [_expand(v) for v in raw]
    return raw


def load_config(path: Path) -> PavlovConfig:
    """Load and validate pavlov settings from a YAML file."""
    if not path.exists():
        raise FileNotFoundError(f"config file not found: {path}")
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Expected a mapping at the top level of {path}")

    config = PavlovConfig(**_expand(raw))

    # Resolve a relative debug log path relative to the config file location
    if config.debug_log is not None:
        log_path = Path(config.debug_log)
        if not log_path.is_absolute():
            config.debug_log = str((config_dir / log_path).resolve())

    return config
