"""
Flat-file store shared across all routes.

The whole state is one pretty-printed JSON document:
    {"sessions": {id: Session}, "nominations": {id: [Nomination, ...]}}

Every request reads the full document, changes it and writes it back.
Within one process, mutate() serialises those cycles behind a lock; separate
processes pointed at the same file can still overwrite each other.
"""

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from pydantic import ValidationError

import config
from models.document import Document

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """The data file exists but does not hold a valid document."""


class JsonStore:
    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.RLock()

    def init(self) -> None:
        """Create the data file with empty mappings if it is missing."""
        with self._lock:
            if not self.path.exists():
                logger.info("Initialising empty data file at %s", self.path)
                self.write(Document())

    def read(self) -> Document:
        with self._lock:
            if not self.path.exists():
                self.init()
                return Document()
            raw = self.path.read_text(encoding="utf-8")
            try:
                return Document.model_validate_json(raw)
            except ValidationError as e:
                raise StoreError(f"Unreadable data file {self.path}: {e}") from e

    def write(self, doc: Document) -> None:
        payload = json.dumps(doc.model_dump(mode="json", by_alias=True), indent=2)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        # Write beside the target then rename, so readers never see half a file
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    @contextmanager
    def mutate(self) -> Iterator[Document]:
        """
        Read-modify-write under the store lock.

        The document is written back only if the block exits normally, so
        raising (e.g. HTTPException for a missing session) leaves the file
        untouched.
        """
        with self._lock:
            doc = self.read()
            yield doc
            self.write(doc)


db = JsonStore(config.DATA_FILE)
