"""Flatten a status XML document into (element path, text) pairs."""

from __future__ import annotations

import logging
from xml.etree.ElementTree import ParseError, XMLParser

logger = logging.getLogger(__name__)

TextLeaf = tuple[tuple[str, ...], str]


def _local_name(tag: str) -> str:
    # ElementTree reports namespaced tags as "{uri}local"
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[-1]
    return tag


class _PathCollector:
    """ElementTree parser target that tracks the ancestor path.

    Character data is buffered between two tags and flushed against the
    path that is current at that moment, so text after a nested element
    belongs to the enclosing element again.
    """

    def __init__(self) -> None:
        self.path: list[str] = []
        self.leaves: list[TextLeaf] = []
        self._data: list[str] = []

    def start(self, tag: str, attrib: dict[str, str]) -> None:
        self._flush()
        self.path.append(_local_name(tag))

    def end(self, tag: str) -> None:
        self._flush()
        if self.path:
            self.path.pop()

    def data(self, data: str) -> None:
        self._data.append(data)

    # Comments and processing instructions end a text run
    def comment(self, text: str) -> None:
        self._flush()

    def pi(self, target: str, text: str) -> None:
        self._flush()

    def close(self) -> list[TextLeaf]:
        self._flush()
        return self.leaves

    def _flush(self) -> None:
        text = "".join(self._data).strip()
        self._data.clear()
        if text and self.path:
            self.leaves.append((tuple(self.path), text))


def _byte_offset(document: str | bytes, line: int, column: int) -> int:
    raw = document.encode("utf-8") if isinstance(document, str) else document
    lines = raw.splitlines(keepends=True)
    return sum(len(chunk) for chunk in lines[: max(line - 1, 0)]) + column


def flatten_status_xml(document: str | bytes) -> list[TextLeaf]:
    """Walk *document* depth-first and return every non-empty text run.

    Each entry is the tuple of ancestor tag names (root first) and the
    trimmed text.  A parse error stops the walk; entries collected before
    the error are still returned.
    """
    collector = _PathCollector()
    parser = XMLParser(target=collector)
    try:
        parser.feed(document)
        parser.close()
    except ParseError as exc:
        line, column = exc.position
        logger.warning("Make sure you configured the right url!")
        logger.error(
            "Error while parsing xml at position %d (line %d, column %d): %s",
            _byte_offset(document, line, column), line, column, exc,
        )
        return collector.close()
    return collector.leaves
