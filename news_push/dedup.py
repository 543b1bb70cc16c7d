from __future__ import annotations

import hashlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterator, Set, Union

from .models import Article

logger = logging.getLogger(__name__)


def article_identity(article: Article) -> str:
    """
    Stable identity of the underlying story: sha256 of lowercased title + publish date.

    The link is not part of the key, so re-fetches with different query strings collapse.
    """
    key = f"{article.title.lower()}{article.pub_date}"
    return hashlib.sha256(key.encode("utf-8")).hexdigest()


class IdentityStore:
    """
    Persisted set of identities of already-notified articles.

    Append-only: identities are never evicted. The file holds a JSON array of strings
    and is rewritten in full on every `persist()`.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._ids: Set[str] = set()

    def load(self) -> "IdentityStore":
        """Read the file; a missing or corrupt file leaves the store empty."""
        self._ids = set()
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("No identity file at %s; starting empty", self.path)
            return self
        except OSError as e:
            logger.warning("Could not read identity file %s: %s", self.path, e)
            return self

        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning("Corrupt identity file %s: %s", self.path, e)
            return self
        if not isinstance(data, list):
            logger.warning("Identity file %s does not hold a list; ignoring", self.path)
            return self

        self._ids = {x for x in data if isinstance(x, str)}
        logger.info("Loaded %d notified identities from %s", len(self._ids), self.path)
        return self

    def persist(self) -> None:
        """Write the whole set atomically (temp file + rename)."""
        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(sorted(self._ids), f, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except BaseException:
            try:
                os.unlink(tmp)
            except OSError:
                pass
            raise

    def contains(self, identity: str) -> bool:
        return identity in self._ids

    def add(self, identity: str) -> None:
        self._ids.add(identity)

    def __contains__(self, identity: object) -> bool:
        return identity in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._ids))
