"""Single-record profile storage in profile.json."""
from __future__ import annotations

from pathlib import Path

from grindbreaker.config import DATA_DIR, ensure_dirs
from grindbreaker.log import get_logger
from grindbreaker.models import Profile
from grindbreaker.repositories.base import ProfileRepositoryBase, read_json, write_json

log = get_logger(__name__)

PROFILE_FILE = "profile.json"


class ProfileRepository(ProfileRepositoryBase):
    def __init__(self, data_dir: Path | None = None) -> None:
        self.data_dir = ensure_dirs(Path(data_dir) if data_dir else DATA_DIR)
        self.path = self.data_dir / PROFILE_FILE

    def get_profile(self) -> Profile | None:
        """None when never saved, or when the file cannot be read back."""
        if not self.path.exists():
            return None
        try:
            data = read_json(self.path)
            if data is None:
                return None
            return Profile.model_validate(data)
        except (OSError, ValueError, RecursionError) as exc:
            log.error("Error reading profile %s: %s", self.path, exc)
            return None

    def save_profile(self, profile: Profile | None) -> bool:
        if profile is None:
            return False
        try:
            write_json(self.path, profile.to_dict())
        except (OSError, TypeError, ValueError) as exc:
            log.error("Error saving profile: %s", exc)
            return False
        log.debug("Profile saved → %s", self.path)
        return True

    def delete_profile(self) -> bool:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            log.error("Error deleting profile: %s", exc)
            return False
        return True
