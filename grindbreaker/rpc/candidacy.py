"""RPC handlers for candidacies.

Each handler takes the raw JSON argument array the UI passed, validates it,
calls the repository and answers with an ``RPCResult``. Company and title are
required here; the repository itself stores whatever it is given.
"""
from __future__ import annotations

from typing import Any

from grindbreaker.log import get_logger
from grindbreaker.models import Candidacy, CandidacyStatus
from grindbreaker.repositories.base import CandidacyRepositoryBase
from grindbreaker.rpc.handler import as_id, as_text, parse_args, rpc_handler
from grindbreaker.rpc.result import RPCResult

log = get_logger(__name__)

INVALID_ID = "Invalid candidacy ID"
INVALID_DATA = "Invalid candidacy data"
REQUIRED_FIELDS = "Company and Title are required fields"


def _first_candidacy(req: str | None) -> Candidacy | RPCResult:
    args = parse_args(req)
    if not args or args[0] is None:
        return RPCResult.error(INVALID_DATA)
    candidacy = Candidacy.model_validate(args[0])
    if not candidacy.company.strip() or not candidacy.title.strip():
        return RPCResult.error(REQUIRED_FIELDS)
    return candidacy


def _first_id(req: str | None) -> str | None:
    args = parse_args(req)
    if not args:
        return None
    return as_id(args[0]) or None


class CandidacyRPC:
    def __init__(self, repository: CandidacyRepositoryBase) -> None:
        self.repository = repository

    @rpc_handler(
        failure="An error occurred while retrieving candidacies",
        serialize_failure="Error serializing candidacies data",
    )
    def get_all_candidacies(self, req: str | None) -> RPCResult:
        return RPCResult.success(self.repository.get_all_candidacies())

    @rpc_handler(failure="An error occurred while retrieving the candidacy")
    def get_candidacy(self, req: str | None) -> RPCResult:
        candidacy_id = _first_id(req)
        if candidacy_id is None:
            return RPCResult.error(INVALID_ID)
        candidacy = self.repository.get_candidacy(candidacy_id)
        if candidacy is None:
            return RPCResult.not_found()
        return RPCResult.success(candidacy)

    @rpc_handler(failure="An error occurred while saving the candidacy")
    def save_candidacy(self, req: str | None) -> RPCResult:
        candidacy = _first_candidacy(req)
        if isinstance(candidacy, RPCResult):
            return candidacy
        candidacy.assign_id_if_blank()
        if not self.repository.save_candidacy(candidacy):
            return RPCResult.error("Failed to save candidacy")
        log.info("Saved candidacy %s (%s @ %s)", candidacy.id, candidacy.title, candidacy.company)
        return RPCResult.success("Candidacy saved successfully")

    @rpc_handler(failure="An error occurred while updating the candidacy")
    def update_candidacy(self, req: str | None) -> RPCResult:
        candidacy = _first_candidacy(req)
        if isinstance(candidacy, RPCResult):
            return candidacy
        if not self.repository.update_candidacy(candidacy):
            return RPCResult.error("Failed to update candidacy")
        log.info("Updated candidacy %s", candidacy.id)
        return RPCResult.success("Candidacy updated successfully")

    @rpc_handler(failure="An error occurred while deleting the candidacy")
    def delete_candidacy(self, req: str | None) -> RPCResult:
        candidacy_id = _first_id(req)
        if candidacy_id is None:
            return RPCResult.error(INVALID_ID)
        if not self.repository.delete_candidacy(candidacy_id):
            return RPCResult.error("Failed to delete candidacy")
        log.info("Deleted candidacy %s", candidacy_id)
        return RPCResult.success("Candidacy deleted successfully")

    @rpc_handler(failure="An error occurred while updating the candidacy status")
    def update_candidacy_status(self, req: str | None) -> RPCResult:
        """Arguments are ``[id, status]``; status is a name or an ordinal."""
        args: list[Any] | None = parse_args(req)
        if args is None or len(args) < 2:
            return RPCResult.error("Invalid request data. Expected candidacy ID and status.")

        candidacy_id = as_text(args[0])
        status_value = as_text(args[1])
        if not candidacy_id or not status_value:
            return RPCResult.error("Candidacy ID and status are required")

        status = CandidacyStatus.parse(status_value)
        if status is None:
            return RPCResult.error("Invalid status value")

        if not self.repository.update_candidacy_status(candidacy_id, status):
            return RPCResult.error("Failed to update candidacy status")
        log.info("Candidacy %s → %s", candidacy_id, status.name)
        return RPCResult.success("Candidacy status updated successfully")
