"""Configuration for word ranking runs."""

from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from .errors import InvalidArgumentError
from .sources import DEFAULT_CHUNK_SIZE, DEFAULT_TIMEOUT
from .table import DEFAULT_CAPACITY, DEFAULT_LOAD_FACTOR, HASH_FUNCTIONS
from .tokenizer import OverlongPolicy


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class RankConfig:
    """Tunable settings for tokenizing, counting and ranking."""

    top: int = 10
    max_word_length: int | None = None  # None = no limit
    overlong: str = OverlongPolicy.SPLIT.value
    capacity: int = DEFAULT_CAPACITY
    load_factor: float = DEFAULT_LOAD_FACTOR
    hash: str = "builtin"
    chunk_size: int = DEFAULT_CHUNK_SIZE
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check every field, raising InvalidArgumentError on the first bad one."""
        if not _is_int(self.top) or self.top < 0:
            raise InvalidArgumentError(f"top must be a non-negative integer, got {self.top!r}")
        if self.max_word_length is not None and (
            not _is_int(self.max_word_length) or self.max_word_length < 1
        ):
            raise InvalidArgumentError(
                f"max_word_length must be a positive integer or null, got {self.max_word_length!r}"
            )
        self.overlong = OverlongPolicy.parse(self.overlong).value
        if not _is_int(self.capacity) or self.capacity < 1:
            raise InvalidArgumentError(f"capacity must be a positive integer, got {self.capacity!r}")
        if not isinstance(self.load_factor, (int, float)) or not 0 < self.load_factor <= 1:
            raise InvalidArgumentError(f"load_factor must be in (0, 1], got {self.load_factor!r}")
        if self.hash not in HASH_FUNCTIONS:
            choices = ", ".join(sorted(HASH_FUNCTIONS))
            raise InvalidArgumentError(
                f"Unknown hash function: {self.hash!r} (expected one of {choices})"
            )
        if not _is_int(self.chunk_size) or self.chunk_size < 1:
            raise InvalidArgumentError(
                f"chunk_size must be a positive integer, got {self.chunk_size!r}"
            )
        if not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
            raise InvalidArgumentError(f"timeout must be positive, got {self.timeout!r}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RankConfig":
        """Create RankConfig from a YAML dict, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidArgumentError(f"Unknown config key(s): {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Path) -> "RankConfig":
        """Load configuration from a YAML file.

        Settings may sit at the top level or under a ``wordrank`` section.
        An empty file gives the defaults.
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise InvalidArgumentError(f"Cannot load config file {path}: {e}") from e
        if not isinstance(data, dict):
            raise InvalidArgumentError(f"Config file {path} must contain a mapping")
        if isinstance(data.get("wordrank"), dict):
            data = data["wordrank"]
        return cls.from_dict(data)

    def override(self, overrides: dict[str, Any]) -> None:
        """Apply overrides. On a validation error the config is left unchanged."""
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise InvalidArgumentError(f"Unknown config key(s): {', '.join(unknown)}")
        candidate = replace(self, **overrides)
        for f in fields(self):
            setattr(self, f.name, getattr(candidate, f.name))

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def parse_key_value_args(args: list[str]) -> dict[str, Any]:
    """Parse key=value arguments into a dict.

    Args:
        args: List of "key=value" strings.

    Returns:
        Dict of parsed key-value pairs.
    """
    result: dict[str, Any] = {}
    for arg in args:
        if "=" not in arg:
            raise InvalidArgumentError(f"Invalid format: {arg}. Expected key=value")
        key, value = arg.split("=", 1)

        # Try to parse as null, bool or number
        if value.lower() in ("null", "none"):
            result[key] = None
        elif value.lower() == "true":
            result[key] = True
        elif value.lower() == "false":
            result[key] = False
        else:
            try:
                result[key] = float(value) if "." in value else int(value)
            except ValueError:
                result[key] = value

    return result
