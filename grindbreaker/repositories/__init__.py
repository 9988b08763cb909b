from .base import CandidacyRepositoryBase, ProfileRepositoryBase
from .candidacy import CandidacyRepository
from .profile import ProfileRepository

__all__ = [
    "ProfileRepositoryBase", "CandidacyRepositoryBase",
    "ProfileRepository", "CandidacyRepository",
]
