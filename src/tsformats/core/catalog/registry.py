"""Format catalog construction and the process-wide catalog handle.

The catalog is built from the raw definitions in ``formats.py``. Building
partitions them into usable entries and rejected ones; a rejected entry is
logged loudly and never evaluated, so classification stays total.

Usage::

    from tsformats.core.catalog import get_catalog

    catalog = get_catalog()
    catalog.get("ISO_DATE")
    for name, definition in catalog.entries():
        ...
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Callable, Iterable, Iterator
from types import MappingProxyType

from ..exceptions import CatalogError
from ..types import FormatCategory
from .formats import TIMESTAMP_FORMATS
from .pattern_registry import (
    FormatSpec,
    PatternDefinition,
    RejectedDefinition,
    compile_definition,
)

logger = logging.getLogger(__name__)


class Catalog:
    """Read-only mapping of format name to compiled definition.

    Entries keep the order they were declared in. Instances are never
    mutated after construction and can be shared freely between threads.
    """

    __slots__ = ("_entries", "_by_name", "_rejected")

    def __init__(
        self,
        definitions: Iterable[PatternDefinition],
        rejected: Iterable[RejectedDefinition] = (),
    ):
        entries = tuple((d.name, d) for d in definitions)
        by_name = dict(entries)
        if len(by_name) != len(entries):
            raise ValueError("catalog entries must have unique names")
        self._entries = entries
        self._by_name = MappingProxyType(by_name)
        self._rejected = tuple(rejected)

    def get(self, name: str) -> PatternDefinition | None:
        """Exact-name lookup; None if *name* is not a usable entry."""
        return self._by_name.get(name)

    def entries(self) -> tuple[tuple[str, PatternDefinition], ...]:
        """All usable (name, definition) pairs in declaration order."""
        return self._entries

    def names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self._entries)

    def by_category(self, category: FormatCategory) -> tuple[PatternDefinition, ...]:
        return tuple(d for _, d in self._entries if d.category == category)

    @property
    def rejected(self) -> tuple[RejectedDefinition, ...]:
        """Definitions excluded at build time."""
        return self._rejected

    @property
    def is_healthy(self) -> bool:
        return not self._rejected

    def raise_for_rejected(self) -> None:
        """Raise ``CatalogError`` if any definition was rejected at build time."""
        if self._rejected:
            raise CatalogError(
                f"{len(self._rejected)} format definition(s) were rejected",
                names=[r.name for r in self._rejected],
            )

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[PatternDefinition]:
        return iter(d for _, d in self._entries)

    def __repr__(self) -> str:
        return f"Catalog(entries={len(self._entries)}, rejected={len(self._rejected)})"


def build_catalog(specs: Iterable[FormatSpec] = TIMESTAMP_FORMATS) -> Catalog:
    """Compile *specs* into a ``Catalog``.

    Never raises. A definition that fails to compile, is not anchored, or reuses a
    name already taken is moved to ``Catalog.rejected`` and logged at ERROR
    level; the remaining specs are unaffected.
    """
    usable: list[PatternDefinition] = []
    rejected: list[RejectedDefinition] = []
    seen: set[str] = set()

    for spec in specs:
        if spec.name in seen:
            reason = "duplicate format name"
        else:
            try:
                usable.append(compile_definition(spec))
                seen.add(spec.name)
                continue
            except re.error as e:
                reason = f"invalid pattern: {e}"
            except ValueError as e:
                reason = str(e)

        logger.error(
            f"Rejected format definition {spec.name}: {reason}",
            extra={"format_name": spec.name, "reason": reason},
        )
        rejected.append(RejectedDefinition(name=spec.name, regex=spec.regex, reason=reason))

    logger.debug(f"Built format catalog with {len(usable)} entries ({len(rejected)} rejected)")
    return Catalog(usable, rejected)


class LazyCatalog:
    """Thread-safe handle that builds its catalog on first access.

    The builder runs at most once, even when many threads ask for the
    catalog at the same time; every caller receives the same object.
    """

    def __init__(self, builder: Callable[[], Catalog] = build_catalog):
        self._builder = builder
        self._catalog: Catalog | None = None
        self._lock = threading.Lock()

    def get(self) -> Catalog:
        catalog = self._catalog
        if catalog is None:
            with self._lock:
                if self._catalog is None:
                    self._catalog = self._builder()
                catalog = self._catalog
        return catalog

    @property
    def is_built(self) -> bool:
        return self._catalog is not None


_DEFAULT_CATALOG = LazyCatalog()


def get_catalog() -> Catalog:
    """Return the process-wide catalog, building it on first use."""
    return _DEFAULT_CATALOG.get()
