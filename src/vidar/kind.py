"""Environment kinds.

Each kind maps to exactly one short token. The token names the kind's
properties file (``dev`` -> ``dev.env``) and is the only accepted spelling
when parsing a kind from a string.
"""

from enum import Enum

from vidar.exceptions import InvalidKindError

ENV_SUFFIX = ".env"


class Kind(Enum):
    """Environment kinds, valued by their canonical token."""

    COMMON = "common"
    DEVELOPMENT = "dev"
    TEST = "test"
    INTEGRATION = "int"
    STAGING = "stage"
    PRODUCTION = "prod"

    def __str__(self) -> str:
        return self.value

    @property
    def token(self) -> str:
        """The canonical short token for this kind."""
        return self.value

    def file_name(self, suffix: str = ENV_SUFFIX) -> str:
        """Name of the properties file for this kind (e.g. ``prod.env``)."""
        return f"{self.value}{suffix}"

    @classmethod
    def parse(cls, token: str) -> "Kind":
        """Parse a canonical token into a Kind.

        Matching is exact and case-sensitive; surrounding whitespace is not
        stripped.

        Raises:
            InvalidKindError: If ``token`` is not one of the canonical tokens.
        """
        if isinstance(token, str):
            for kind in cls:
                if kind.value == token:
                    return kind
        raise InvalidKindError(token)


def parse_kind(token: str) -> Kind:
    """Parse ``token`` into a :class:`Kind`. See :meth:`Kind.parse`."""
    return Kind.parse(token)


def to_token(kind: Kind) -> str:
    """Return the canonical token for ``kind``."""
    return kind.value


__all__ = ["ENV_SUFFIX", "Kind", "parse_kind", "to_token"]
