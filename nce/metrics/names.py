"""Metric name bookkeeping: collision suffixes and the drift signature."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable

HASH_METRIC = "nc_metric_names_hash"


class NameCounter:
    """Counts undecorated metric names within one conversion.

    The first occurrence of a name is used unchanged; later ones get the
    occurrence number appended (``storage_num_users2``).  A suffix that
    would repeat an already emitted name is increased until it is free.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}
        self._emitted: set[str] = set()

    def register(self, name: str) -> str:
        count = self._counts.get(name, 0) + 1
        self._counts[name] = count

        candidate = name if count == 1 else f"{name}{count}"
        suffix = count
        while candidate in self._emitted:
            suffix += 1
            candidate = f"{name}{suffix}"
        self._emitted.add(candidate)
        return candidate

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._counts)


def names_hash(names: Iterable[str]) -> int:
    """Return the first three bytes of an MD5 over the sorted name set.

    Every name is followed by a newline before hashing.  The result only
    changes when a name appears or disappears.
    """
    text = "".join(f"{name}\n" for name in sorted(set(names)))
    digest = hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()
    return int(digest[:6], 16)
