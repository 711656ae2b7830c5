"""Top-level deadlink configuration."""

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .HttpConfig import HttpConfig
from .LogConfig import LogConfig
from .RuleConfig import RuleConfig


class DeadLinkConfig(BaseModel):
    """Top-level configuration: rule options, HTTP settings and logging."""

    model_config = ConfigDict(extra="forbid")

    rule: RuleConfig = Field(default_factory=RuleConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get deadlink home directory based on DEADLINK_HOME or default to ~/.deadlink."""
        home_env = os.environ.get("DEADLINK_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".deadlink"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the deadlink home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls, path: Path | None = None) -> "DeadLinkConfig":
        """Load and validate config from file.

        A missing file yields the defaults; every section is optional.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = path or cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
