# rfcli/config/schema.py
"""
Configuration schema for rfcli.

This is the SINGLE source of truth for configuration shape.

Schema hierarchy:
- RfcliConfig: The root config consumed by the CLI
- SourceConfig: Where RFCs and the index are downloaded from
- CacheConfig: Optional cache root override
- ReadConfig: Read loop behavior (pager, error pause)
- SelectorConfig: Fuzzy finder settings
- TldrConfig: Summarizer excerpting and backend table
- LoggingConfig: Logging settings
"""

from __future__ import annotations

import shlex
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SourceConfig(BaseModel):
    """Remote RFC source."""

    base_url: str = Field("https://www.rfc-editor.org", description="RFC host base URL")

    model_config = ConfigDict(extra="forbid")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class CacheConfig(BaseModel):
    dir: Optional[str] = Field(None, description="Cache root override")

    model_config = ConfigDict(extra="forbid")


class ReadConfig(BaseModel):
    """Read loop settings."""

    error_pause_seconds: float = Field(2.0, ge=0.0, description="Pause after an error message")
    max_consecutive_errors: int = Field(
        3, ge=1, description="Selection-stage failures in a row before the loop gives up"
    )
    pager: Optional[str] = Field(None, description="Explicit pager command line")

    model_config = ConfigDict(extra="forbid")

    @field_validator("pager")
    @classmethod
    def pager_command_parses(cls, v: Optional[str]) -> Optional[str]:
        # shlex ValueError (unbalanced quotes) becomes a validation error; blank means unset
        if v is None:
            return v
        if not shlex.split(v):
            return None
        return v


class SelectorConfig(BaseModel):
    command: str = Field("fzf", description="Fuzzy finder executable")
    height: str = Field("50%", description="Finder height (fzf --height)")

    model_config = ConfigDict(extra="forbid")


class BackendConfig(BaseModel):
    """
    One summarization backend.

    Hosted backends name the environment variable holding their bearer
    credential in api_key_env; local backends leave it unset.
    """

    base_url: str
    model: str
    api_key_env: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class TldrConfig(BaseModel):
    """Summarizer settings."""

    backend: str = Field("groq", description="Key into backends")
    context_lines: int = Field(300, ge=1, description="Lines of the document sent as primary context")
    section: Optional[str] = Field(
        "Security Considerations", description="Section excerpted as supplementary context"
    )
    section_lines: int = Field(80, ge=0, description="Lines taken from the located section")
    backends: dict[str, BackendConfig] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def selected_backend_configured(self) -> "TldrConfig":
        if self.backend not in self.backends:
            raise ValueError(f"tldr.backend '{self.backend}' has no entry in tldr.backends")
        return self


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    model_config = ConfigDict(extra="forbid")

    @field_validator("level", mode="before")
    @classmethod
    def upper(cls, v):
        return v.upper() if isinstance(v, str) else v


class RfcliConfig(BaseModel):
    """
    Root configuration.

    Examples:
        >>> cfg = RfcliConfig.model_validate(load_config_dict())
        >>> cfg.tldr.backends[cfg.tldr.backend].model
        'llama-3.1-8b-instant'
    """

    source: SourceConfig = Field(default_factory=SourceConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    read: ReadConfig = Field(default_factory=ReadConfig)
    selector: SelectorConfig = Field(default_factory=SelectorConfig)
    tldr: TldrConfig
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")
