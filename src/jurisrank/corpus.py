"""Corpus stores.

The engine only needs an object with ``load() -> list``. Two stores ship
with the package: a JSON file store (the export format of the precedent
collection, either a bare list or ``{"precedentes": [...]}``) and an
in-memory store.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Iterable, List, Optional, Protocol

from pydantic import ValidationError

from jurisrank.errors import CorpusLoadError
from jurisrank.schemas import Precedent

logger = logging.getLogger(__name__)


class CorpusStore(Protocol):
    def load(self) -> Optional[List[Precedent]]:
        ...


def parse_records(items: Iterable[Any], source: str = '<memory>') -> List[Precedent]:
    """Validate raw records, skipping (and logging) the malformed ones."""
    out: List[Precedent] = []
    skipped = 0
    for idx, item in enumerate(items):
        if isinstance(item, Precedent):
            out.append(item)
            continue
        if not isinstance(item, dict):
            skipped += 1
            continue
        try:
            out.append(Precedent.model_validate(item))
        except ValidationError as e:
            skipped += 1
            logger.warning("Skipping precedent #%d from %s: %s", idx, source, e.errors()[0].get('msg'))
    if skipped:
        logger.warning("Skipped %d malformed records from %s", skipped, source)
    return out


class JsonCorpusStore:
    def __init__(self, path: str) -> None:
        self.path = path

    def load(self) -> List[Precedent]:
        if not os.path.exists(self.path):
            logger.warning("Corpus file not found at %s", self.path)
            return []
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise CorpusLoadError(f"Invalid JSON in corpus {self.path}: {e}") from e
        except OSError as e:
            raise CorpusLoadError(f"Failed to read corpus {self.path}: {e}") from e

        if isinstance(data, dict):
            data = data.get('precedentes') or []
        if not isinstance(data, list):
            raise CorpusLoadError(f"Corpus {self.path} must be a list or hold a 'precedentes' list")
        records = parse_records(data, self.path)
        logger.info("Loaded %d precedents from %s", len(records), self.path)
        return records


class StaticCorpusStore:
    def __init__(self, records: Iterable[Any]) -> None:
        self._records = parse_records(records)

    def load(self) -> List[Precedent]:
        return list(self._records)


__all__ = ['CorpusStore', 'JsonCorpusStore', 'StaticCorpusStore', 'parse_records']
