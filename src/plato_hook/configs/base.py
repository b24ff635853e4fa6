from __future__ import annotations

import yaml
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Type, TypeVar

T = TypeVar("T", bound="BaseConfig")

__all__ = ["BaseConfig"]


@dataclass
class BaseConfig:
    """Dataclass config that can be loaded from a mapping or a YAML file."""

    @classmethod
    def from_yaml(cls: Type[T], path: str | Path) -> T:
        """Load configuration from a YAML file. An empty file gives the defaults."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls: Type[T], data: dict[str, Any]) -> T:
        """Create configuration from a dictionary. Unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary."""
        return asdict(self)
