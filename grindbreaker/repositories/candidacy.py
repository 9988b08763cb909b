"""Candidacy collection storage in candidacies.json.

Every mutation loads the whole collection, changes it in memory and rewrites
the whole file. There is no locking; one user, one process.
"""
from __future__ import annotations

from pathlib import Path

from pydantic import TypeAdapter

from grindbreaker.config import DATA_DIR, ensure_dirs
from grindbreaker.log import get_logger
from grindbreaker.models import Candidacy, CandidacyStatus
from grindbreaker.repositories.base import CandidacyRepositoryBase, read_json, write_json

log = get_logger(__name__)

CANDIDACIES_FILE = "candidacies.json"

_COLLECTION = TypeAdapter(list[Candidacy])


class CandidacyRepository(CandidacyRepositoryBase):
    def __init__(self, data_dir: Path | None = None) -> None:
        self.data_dir = ensure_dirs(Path(data_dir) if data_dir else DATA_DIR)
        self.path = self.data_dir / CANDIDACIES_FILE

    def get_all_candidacies(self) -> list[Candidacy]:
        """Whole collection; empty when the file is missing or unreadable."""
        if not self.path.exists():
            return []
        try:
            data = read_json(self.path)
            if data is None:
                return []
            return _COLLECTION.validate_python(data)
        except (OSError, ValueError, RecursionError) as exc:
            log.error("Error reading candidacies %s: %s", self.path, exc)
            return []

    def get_candidacy(self, candidacy_id: str | None) -> Candidacy | None:
        if not candidacy_id:
            return None
        for c in self.get_all_candidacies():
            if c.id == candidacy_id:
                return c
        return None

    def save_candidacy(self, candidacy: Candidacy | None) -> bool:
        # No duplicate-id check: a resubmitted record is appended again.
        if candidacy is None:
            return False
        candidacies = self.get_all_candidacies()
        candidacies.append(candidacy)
        return self._write(candidacies, "saving candidacy")

    def update_candidacy(self, candidacy: Candidacy | None) -> bool:
        if candidacy is None or not candidacy.id:
            return False
        candidacies = self.get_all_candidacies()
        index = self._index_of(candidacies, candidacy.id)
        if index is None:
            return False
        candidacies[index] = candidacy
        return self._write(candidacies, "updating candidacy")

    def delete_candidacy(self, candidacy_id: str | None) -> bool:
        if not candidacy_id:
            return False
        candidacies = self.get_all_candidacies()
        index = self._index_of(candidacies, candidacy_id)
        if index is None:
            return False
        del candidacies[index]
        return self._write(candidacies, "deleting candidacy")

    def update_candidacy_status(self, candidacy_id: str | None, status: CandidacyStatus) -> bool:
        """Change only ``status`` of the first record with this id."""
        if not candidacy_id:
            return False
        candidacies = self.get_all_candidacies()
        index = self._index_of(candidacies, candidacy_id)
        if index is None:
            return False
        candidacies[index].status = CandidacyStatus(status)
        return self._write(candidacies, "updating candidacy status")

    @staticmethod
    def _index_of(candidacies: list[Candidacy], candidacy_id: str) -> int | None:
        for i, c in enumerate(candidacies):
            if c.id == candidacy_id:
                return i
        return None

    def _write(self, candidacies: list[Candidacy], action: str) -> bool:
        try:
            write_json(self.path, [c.to_dict() for c in candidacies])
        except (OSError, TypeError, ValueError) as exc:
            log.error("Error %s: %s", action, exc)
            return False
        log.debug("Wrote %d candidacies → %s", len(candidacies), self.path.name)
        return True
