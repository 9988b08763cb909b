import functools

from .candidacy import CandidacyRPC
from .host import Host, LocalHost, StdioHost
from .profile import ProfileRPC
from .result import RPCResult, RPCResultType

from grindbreaker.config import DEFAULT_BINDING_PREFIX
from grindbreaker.log import get_logger

log = get_logger(__name__)

__all__ = [
    "CandidacyRPC", "ProfileRPC", "RPCResult", "RPCResultType",
    "Host", "LocalHost", "StdioHost", "bind_rpcs",
]

PROFILE_BINDINGS: dict[str, str] = {
    "GetProfile": "get_profile",
    "SaveProfile": "save_profile",
}

CANDIDACY_BINDINGS: dict[str, str] = {
    "GetAllCandidacies": "get_all_candidacies",
    "GetCandidacy": "get_candidacy",
    "SaveCandidacy": "save_candidacy",
    "UpdateCandidacy": "update_candidacy",
    "DeleteCandidacy": "delete_candidacy",
    "UpdateCandidacyStatus": "update_candidacy_status",
}


def bind_rpcs(
    host: Host,
    profile_rpc: ProfileRPC,
    candidacy_rpc: CandidacyRPC,
    prefix: str = DEFAULT_BINDING_PREFIX,
) -> list[str]:
    """Register every handler on the host as ``<prefix><Operation>``."""
    names: list[str] = []
    for rpc, table in ((profile_rpc, PROFILE_BINDINGS), (candidacy_rpc, CANDIDACY_BINDINGS)):
        for operation, attr in table.items():
            name = prefix + operation
            host.bind(name, functools.partial(getattr(rpc, attr), host))
            names.append(name)
    log.info("Bound %d RPC functions (prefix %s)", len(names), prefix)
    return names
