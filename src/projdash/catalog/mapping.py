"""Directory scan and model grouping.

The grouping is computed from a single scan of the root and then frozen.
``ProjectCatalog`` memoizes it for the life of the process: directories
created after the first build stay invisible until restart.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from projdash.catalog.rules import classify
from projdash.errors import ScanError

logger = logging.getLogger("projdash.catalog")

Classifier = Callable[[str], str | None]


@dataclass(frozen=True, slots=True)
class Grouping:
    """Projects grouped by model key.

    ``groups`` keeps scan-encounter order inside each model and never holds
    an empty sequence. ``categories`` is the lexicographically sorted key
    set; its positions are the model half of ``/p/<model>-<project>/``.
    """

    groups: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    categories: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.categories)

    def __iter__(self) -> Iterator[str]:
        return iter(self.categories)

    def __contains__(self, key: object) -> bool:
        return key in self.groups

    def projects(self, key: str) -> tuple[str, ...]:
        """Projects for *key* in scan order (empty for absent keys)."""
        return self.groups.get(key, ())

    def lookup(self, model_idx: int, proj_idx: int) -> str | None:
        """Directory at (*model_idx*, *proj_idx*), or ``None`` if either is out of range."""
        if not 0 <= model_idx < len(self.categories):
            return None
        projects = self.groups[self.categories[model_idx]]
        if not 0 <= proj_idx < len(projects):
            return None
        return projects[proj_idx]

    @property
    def project_count(self) -> int:
        return sum(len(p) for p in self.groups.values())


def scan_directories(root: str | Path) -> list[str]:
    """Names of directory entries directly under *root*.

    Order is whatever the filesystem yields and is kept as-is. Symlinks
    to directories count; files and broken links are skipped.

    Raises:
        ScanError: *root* is missing or unreadable.
    """
    try:
        with os.scandir(root) as entries:
            return [entry.name for entry in entries if entry.is_dir()]
    except OSError as exc:
        raise ScanError(str(root), exc.strerror or str(exc)) from exc


def build_grouping(names: Iterable[str], classifier: Classifier = classify) -> Grouping:
    """Classify *names* and group them by model key.

    Unclassified names are dropped. Duplicate names keep their first
    occurrence only, so no directory appears twice.
    """
    groups: dict[str, list[str]] = {}
    seen: set[str] = set()
    for name in names:
        if name in seen:
            continue
        seen.add(name)
        key = classifier(name)
        if key is None:
            continue
        groups.setdefault(key, []).append(name)

    frozen = {key: tuple(projects) for key, projects in groups.items()}
    return Grouping(
        groups=MappingProxyType(frozen),
        categories=tuple(sorted(frozen)),
    )


class ProjectCatalog:
    """Build-once holder for the grouping of one scan root.

    Thread safety:
        The first access to ``grouping`` scans under a Lock with a
        double check, so concurrent first callers (worker threads or
        coroutines on one loop) all observe the same completed build.
        After that, reads take no lock. A failed scan is not cached;
        the ``ScanError`` reaches the caller that triggered it.
    """

    __slots__ = ("_classifier", "_grouping", "_lock", "root")

    def __init__(self, root: str | Path, *, classifier: Classifier = classify) -> None:
        self.root = Path(root)
        self._classifier = classifier
        self._grouping: Grouping | None = None
        self._lock = threading.Lock()

    @property
    def is_built(self) -> bool:
        return self._grouping is not None

    @property
    def grouping(self) -> Grouping:
        """The grouping, scanning the root on first access."""
        grouping = self._grouping
        if grouping is not None:
            return grouping
        with self._lock:
            if self._grouping is None:
                self._grouping = self._build()
            return self._grouping

    def _build(self) -> Grouping:
        """Scan and group. MUST only be called while holding _lock."""
        names = scan_directories(self.root)
        grouping = build_grouping(names, self._classifier)
        logger.info(
            "Scanned %s: %d directories, %d projects in %d models",
            self.root,
            len(names),
            grouping.project_count,
            len(grouping),
        )
        return grouping
