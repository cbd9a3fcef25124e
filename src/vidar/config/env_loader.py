"""Environment loader.

Builds an Environment from three sources in deterministic order:
1) OS environment variables (if ``seed_from_os_env``)
2) ``common.env`` (if ``load_common``)
3) ``<kind>.env`` (highest precedence)

Later sources overwrite earlier ones key by key. Any failure aborts the load.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Mapping, Optional

from vidar.config.paths import find_env_file, resolve_base_dir
from vidar.config.settings import Config
from vidar.environment import Environment
from vidar.exceptions import VidarError
from vidar.kind import Kind
from vidar.logger import Logger
from vidar.parser import parse_file


def merge(*sources: Mapping[str, str]) -> Dict[str, str]:
    """Merge mappings left to right; the last source wins on shared keys."""
    merged: Dict[str, str] = {}
    for source in sources:
        merged.update(source)
    return merged


class EnvLoader:
    """Load an Environment for a Config."""

    def __init__(
        self,
        config: Config,
        logger: Optional[Logger] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Args:
            config: What to load
            logger: Receives debug records; nothing is logged without one
            environ: Process environment used for seeding and directory
                resolution (defaults to ``os.environ`` at load time)
        """
        self.config = config
        self.logger = logger
        self.environ = environ

    def _environ(self) -> Mapping[str, str]:
        return self.environ if self.environ is not None else os.environ

    def file_path(self, kind: Kind, base_dir: Optional[Path] = None) -> Path:
        """Path of the properties file for ``kind``."""
        if base_dir is None:
            base_dir = resolve_base_dir(self.config, self._environ())
        return find_env_file(
            base_dir,
            kind.file_name(self.config.suffix),
            recursive=self.config.recursive,
        )

    def _read(self, kind: Kind, base_dir: Path) -> Dict[str, str]:
        path = self.file_path(kind, base_dir)
        props = parse_file(
            path,
            has_comments=self.config.has_comments,
            comment_char=self.config.comment_char,
        )
        if self.logger is not None:
            self.logger.debug("Parsed properties file", kind=kind.token, path=str(path), count=len(props))
        return props

    def load(self) -> Environment:
        """Load environment data with deterministic precedence.

        Precedence (low -> high): OS env vars, common file, kind file

        Raises:
            ConfigPathError: No base directory could be resolved
            EnvFileIOError: A required file could not be read
            InvalidPropertyError: A file contains a malformed line
        """
        config = self.config
        try:
            base_dir = resolve_base_dir(config, self._environ())

            seed: Dict[str, str] = dict(self._environ()) if config.seed_from_os_env else {}
            common = self._read(Kind.COMMON, base_dir) if config.load_common else {}
            specific = self._read(config.kind, base_dir)
        except VidarError as e:
            if self.logger is not None:
                self.logger.error("Environment load failed", kind=config.kind.token, code=e.code)
            raise

        props = merge(seed, common, specific)
        if self.logger is not None:
            self.logger.debug(
                "Loaded environment",
                kind=config.kind.token,
                base_dir=str(base_dir),
                count=len(props),
            )
        return Environment(current=config.kind, props=props)


def load(
    config: Config,
    *,
    logger: Optional[Logger] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Environment:
    """Load the Environment described by ``config``. See :class:`EnvLoader`."""
    return EnvLoader(config, logger=logger, environ=environ).load()


__all__ = ["EnvLoader", "load", "merge"]
