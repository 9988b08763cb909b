"""RPC handlers for the profile."""
from __future__ import annotations

from grindbreaker.log import get_logger
from grindbreaker.models import Profile
from grindbreaker.repositories.base import ProfileRepositoryBase
from grindbreaker.rpc.handler import parse_args, rpc_handler
from grindbreaker.rpc.result import RPCResult

log = get_logger(__name__)


class ProfileRPC:
    def __init__(self, repository: ProfileRepositoryBase) -> None:
        self.repository = repository

    @rpc_handler(
        failure="An error occurred while retrieving the profile",
        serialize_failure="Error serializing profile data",
    )
    def get_profile(self, req: str | None) -> RPCResult:
        """Arguments are ignored. A never-saved profile is a not-found success."""
        profile = self.repository.get_profile()
        if profile is None:
            log.debug("No profile saved yet")
            return RPCResult.not_found()
        return RPCResult.success(profile)

    @rpc_handler(failure="An error occurred while saving the profile")
    def save_profile(self, req: str | None) -> RPCResult:
        args = parse_args(req)
        if not args or args[0] is None:
            return RPCResult.error("Invalid profile data")
        profile = Profile.model_validate(args[0])
        if not self.repository.save_profile(profile):
            return RPCResult.error("Failed to save profile")
        log.info("Profile saved")
        return RPCResult.success("Profile saved successfully")
