"""The result of a load: the resolved kind and its merged properties."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from vidar.kind import Kind


@dataclass(frozen=True)
class Environment:
    """Immutable environment of a given kind.

    Attributes:
        current: The kind that was loaded
        props: Read-only key/value pairs (OS seed + common + kind)
    """

    current: Kind
    props: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Copy so later changes to the caller's dict cannot leak in
        object.__setattr__(self, "props", MappingProxyType(dict(self.props)))

    def __reduce__(self):
        # mappingproxy cannot be pickled; rebuild from a plain dict
        return (Environment, (self.current, dict(self.props)))

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.props.get(key, default)

    def __getitem__(self, key: str) -> str:
        return self.props[key]

    def __contains__(self, key: object) -> bool:
        return key in self.props

    def __iter__(self) -> Iterator[str]:
        return iter(self.props)

    def __len__(self) -> int:
        return len(self.props)


__all__ = ["Environment"]
