"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (LSPHIERARCHY__SECTION__KEY)
3. YAML file (explicit path, else ~/.config/lsphierarchy/config.yaml)
4. Built-in defaults (this file)

Environment Variable Format:
    LSPHIERARCHY__<SECTION>__<KEY>=<VALUE>

Examples:
    LSPHIERARCHY__LOGGING__LEVEL=DEBUG
    LSPHIERARCHY__HIERARCHY__RESOLVE_DEPTH=2
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        LSPHIERARCHY__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every hierarchy request.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class HierarchyConfig(BaseModel):
    """Hierarchy extension behaviour.

    Env vars:
        LSPHIERARCHY__HIERARCHY__RESOLVE_DEPTH: Levels expanded per service query
        LSPHIERARCHY__HIERARCHY__DYNAMIC_REGISTRATION: Advertised client capability
        LSPHIERARCHY__HIERARCHY__ACCEPT_LEGACY_CAPABILITY: Honour `typeHierarchy` server key
    """

    resolve_depth: int = Field(
        default=1,
        ge=0,
        description="Hierarchy levels the services ask the server to resolve. "
        "0 returns the item only, without parents/children or callers/callees.",
    )
    dynamic_registration: bool = Field(
        default=False,
        description="Value of `textDocument.<kind>.dynamicRegistration` sent at initialize.",
    )
    accept_legacy_capability: bool = Field(
        default=True,
        description="Treat the early `typeHierarchy` server capability key as "
        "`typeHierarchyProvider` when the latter is absent.",
    )


class LspHierarchyConfig(BaseModel):
    """Root configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    hierarchy: HierarchyConfig = Field(default_factory=HierarchyConfig)
