import os
import tomllib
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import Any
from typing import Self

DEFAULT_REGISTER = ["yieldio.samples"]
DEFAULT_LIMIT = 100


def _pyproject(start: Path) -> Path | None:
    for path in [start, *start.parents]:
        candidate = path / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def _parse_limit(value: Any) -> int:
    try:
        limit = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Limit must be a positive integer, got: {value!r}") from None
    if limit <= 0:
        raise ValueError(f"Limit must be a positive integer, got: {value!r}")
    return limit


@dataclass(kw_only=True)
class Config:
    """Settings for the command line.

    Environment variables take precedence over the [tool.yieldio] table of
    the nearest pyproject.toml.
    """

    register: list[str] = field(default_factory=lambda: list(DEFAULT_REGISTER))
    limit: int = DEFAULT_LIMIT

    @classmethod
    def load(cls, cwd: Path | None = None) -> Self:
        table: dict[str, Any] = {}
        if pyproject := _pyproject(cwd or Path.cwd()):
            with pyproject.open("rb") as f:
                table = tomllib.load(f).get("tool", {}).get("yieldio", {})

        register = table.get("register", DEFAULT_REGISTER)
        if raw_register := os.environ.get("YIELDIO_REGISTER"):
            register = [m.strip() for m in raw_register.split(",") if m.strip()]

        limit = os.environ.get("YIELDIO_LIMIT") or table.get("limit", DEFAULT_LIMIT)

        return cls(register=list(register), limit=_parse_limit(limit))
