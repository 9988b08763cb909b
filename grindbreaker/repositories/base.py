from __future__ import annotations

import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from grindbreaker.models import Candidacy, CandidacyStatus, Profile


class ProfileRepositoryBase(ABC):
    @abstractmethod
    def get_profile(self) -> Profile | None:
        pass

    @abstractmethod
    def save_profile(self, profile: Profile | None) -> bool:
        pass

    @abstractmethod
    def delete_profile(self) -> bool:
        pass


class CandidacyRepositoryBase(ABC):
    @abstractmethod
    def get_all_candidacies(self) -> list[Candidacy]:
        pass

    @abstractmethod
    def get_candidacy(self, candidacy_id: str | None) -> Candidacy | None:
        pass

    @abstractmethod
    def save_candidacy(self, candidacy: Candidacy | None) -> bool:
        pass

    @abstractmethod
    def update_candidacy(self, candidacy: Candidacy | None) -> bool:
        pass

    @abstractmethod
    def delete_candidacy(self, candidacy_id: str | None) -> bool:
        pass

    @abstractmethod
    def update_candidacy_status(self, candidacy_id: str | None, status: CandidacyStatus) -> bool:
        pass


def read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_json(path: Path, payload: Any) -> None:
    """Serialize first, then swap a sibling temp file over ``path``."""
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp, path)
    except BaseException:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise
