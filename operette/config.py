from __future__ import annotations

"""Runtime configuration for the demo producers and the CLI.

Example YAML:

```yaml
delay_ms: 5
city: Philadelphia, PA
log_level: debug
```
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from operette.errors import ConfigError
from operette.utils.logging import LEVELS

__all__ = ["OperetteConfig", "load_config"]


class OperetteConfig(BaseModel):  # noqa: D101
    delay_ms: int = Field(default=1, ge=0, description="Simulated producer latency.")
    city: str = Field(default="New York, NY", description="City reported by the GPS stub.")
    log_level: str = "info"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        lvl = v.lower()
        if lvl not in LEVELS:
            raise ValueError(f"log_level must be one of {sorted(LEVELS)}, got '{v}'")
        return lvl


def load_config(path: str | Path | None = None) -> OperetteConfig:  # noqa: D401
    """Load and validate a YAML config; ``None`` returns the defaults."""
    if path is None:
        return OperetteConfig()

    p = Path(path)
    if not p.is_file():
        raise ConfigError(f"config file not found: {p}")

    try:
        data: Any = yaml.safe_load(p.read_text()) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {p}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"config root in {p} must be a mapping, got {type(data).__name__}")

    try:
        return OperetteConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"invalid config in {p}:\n{e}") from e
