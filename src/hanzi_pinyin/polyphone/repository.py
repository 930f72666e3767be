"""Registry of polyphone resolvers and the loader for rule datasets."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from importlib.resources import files
import logging
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, Iterator, Mapping

from hanzi_pinyin.polyphone.parser import parse_polyphone_lines
from hanzi_pinyin.polyphone.resolver import PolyphoneResolver

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

logger = logging.getLogger(__name__)


def packaged_polyphone_path() -> Traversable:
    """Return the rule dataset bundled with the package."""

    return files("hanzi_pinyin") / "data" / "polyphones.txt"


@dataclass(frozen=True)
class ResolverRegistry:
    """Read-only map from code point to the resolver for that character."""

    resolvers: Mapping[int, PolyphoneResolver]

    def __post_init__(self) -> None:
        object.__setattr__(self, "resolvers", MappingProxyType(dict(self.resolvers)))

    @classmethod
    def from_resolvers(cls, resolvers: Iterable[PolyphoneResolver]) -> ResolverRegistry:
        """Index resolvers by code point.

        Raises:
            ValueError: If two resolvers handle the same character.
        """

        mapping: dict[int, PolyphoneResolver] = {}
        for resolver in resolvers:
            if resolver.code_point in mapping:
                raise ValueError(f"Duplicate resolver for '{resolver.character}'.")
            mapping[resolver.code_point] = resolver
        return cls(mapping)

    def get(self, code_point: int) -> PolyphoneResolver | None:
        """Return the resolver for ``code_point``, or ``None``."""

        return self.resolvers.get(code_point)

    def __contains__(self, code_point: object) -> bool:
        return code_point in self.resolvers

    def __iter__(self) -> Iterator[PolyphoneResolver]:
        return iter(self.resolvers.values())

    def __len__(self) -> int:
        return len(self.resolvers)


@dataclass(frozen=True)
class PolyphoneRepository:
    """Path-scoped loader that parses a rule dataset once.

    ``path`` may be a filesystem path or a package resource.
    """

    path: Path | Traversable

    @cached_property
    def registry(self) -> ResolverRegistry:
        """Load and cache the registry.

        Raises:
            FileNotFoundError: If the dataset does not exist.
            ValueError: If the dataset is malformed.
        """

        if not self.path.is_file():
            raise FileNotFoundError(f"Polyphone dataset not found: {self.path}")

        with self.path.open("r", encoding="utf-8") as handle:
            resolvers = parse_polyphone_lines(handle, source=str(self.path))

        registry = ResolverRegistry.from_resolvers(resolvers)
        logger.info("Loaded %d polyphone resolvers from %s", len(registry), self.path)
        return registry
