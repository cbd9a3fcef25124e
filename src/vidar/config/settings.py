"""Load request configuration.

A ``Config`` describes one load: which kind to read, where its files live,
whether to fold in ``common.env`` and the OS environment, and how comments are
marked. It is immutable once built; derive variants with ``model_copy``.

Example:
    from vidar.config import Config
    from vidar.kind import Kind

    config = Config(app_name="billing", kind=Kind.PRODUCTION, load_common=True)

    # Or from VIDAR_* environment variables
    config = Config.from_env()
"""

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vidar.kind import ENV_SUFFIX, Kind


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


class Config(BaseModel):
    """Configuration used when loading environment properties.

    Raises on construction:
        InvalidKindError: ``kind`` is not a canonical token
        pydantic.ValidationError: any other invalid field value; this is not
            a ``vidar.ValidationError``
    """

    model_config = ConfigDict(frozen=True)

    kind: Kind = Field(
        default=Kind.DEVELOPMENT,
        description="The environment kind to load"
    )
    app_name: Optional[str] = Field(
        default=None,
        description="Application name, selects <config dir>/<app_name> as base directory"
    )
    load_common: bool = Field(
        default=False,
        description="Read common.env before the kind-specific file"
    )
    has_comments: bool = Field(
        default=False,
        description="Property files may contain comment lines"
    )
    comment_char: str = Field(
        default="#",
        description="Leading character marking a comment line"
    )
    seed_from_os_env: bool = Field(
        default=False,
        description="Start from the process environment (lowest precedence)"
    )
    base_dir: Optional[Path] = Field(
        default=None,
        description="Explicit directory holding the property files"
    )
    recursive: bool = Field(
        default=False,
        description="Search parent directories of the base directory for each file"
    )
    suffix: str = Field(
        default=ENV_SUFFIX,
        description="Property file name suffix"
    )

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, v: Any) -> Any:
        """Accept canonical tokens, strictly"""
        if isinstance(v, Kind):
            return v
        return Kind.parse(v)

    @field_validator("comment_char")
    @classmethod
    def validate_comment_char(cls, v: str) -> str:
        """Comment leader must be exactly one character"""
        if len(v) != 1:
            raise ValueError("comment_char must be a single character")
        return v

    @field_validator("suffix")
    @classmethod
    def validate_suffix(cls, v: str) -> str:
        if "/" in v or "\\" in v:
            raise ValueError("suffix must not contain path separators")
        return v

    def with_kind(self, kind: Kind) -> "Config":
        """Copy of this config targeting another kind"""
        return self.model_copy(update={"kind": kind})

    @classmethod
    def from_env(cls, prefix: str = "VIDAR", **overrides: Any) -> "Config":
        """Create configuration from environment variables

        Args:
            prefix: Environment variable prefix (e.g., VIDAR, BILLING_VIDAR)
            **overrides: Field values taking precedence over the environment

        Environment variables:
            {prefix}_KIND: Kind token (common, dev, test, int, stage, prod)
            {prefix}_APP_NAME: Application name
            {prefix}_LOAD_COMMON: "true" to read common.env
            {prefix}_COMMENTS: "true" if files contain comments
            {prefix}_COMMENT_CHAR: Comment leader
            {prefix}_SEED_OS_ENV: "true" to seed from the OS environment
            {prefix}_BASE_DIR: Explicit base directory
            {prefix}_RECURSIVE: "true" to search parent directories
            {prefix}_SUFFIX: Property file name suffix (default: .env)

        Raises:
            InvalidKindError: If {prefix}_KIND is not a canonical token
        """
        prefix = prefix.rstrip("_")
        base_dir = os.getenv(f"{prefix}_BASE_DIR")

        values: dict = {
            "kind": os.getenv(f"{prefix}_KIND", Kind.DEVELOPMENT.token),
            "app_name": os.getenv(f"{prefix}_APP_NAME") or None,
            "load_common": _env_flag(f"{prefix}_LOAD_COMMON"),
            "has_comments": _env_flag(f"{prefix}_COMMENTS"),
            "comment_char": os.getenv(f"{prefix}_COMMENT_CHAR", "#"),
            "seed_from_os_env": _env_flag(f"{prefix}_SEED_OS_ENV"),
            "base_dir": Path(base_dir) if base_dir else None,
            "recursive": _env_flag(f"{prefix}_RECURSIVE"),
            "suffix": os.getenv(f"{prefix}_SUFFIX", ENV_SUFFIX),
        }
        values.update(overrides)
        return cls(**values)


__all__ = ["Config"]
