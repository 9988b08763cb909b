"""Shared plumbing for RPC handlers: argument parsing and the reply decorator."""
from __future__ import annotations

import functools
import json
from typing import Any, Callable

from pydantic import ValidationError

from grindbreaker.log import get_logger
from grindbreaker.models import PayloadError
from grindbreaker.rpc.result import RPCResult, SerializationError

log = get_logger(__name__)

INVALID_JSON = "Invalid JSON format"


def parse_args(req: str | None) -> list[Any] | None:
    """Decode the raw argument array; None when the payload is JSON null."""
    if req is None or not req.strip():
        return None
    args = json.loads(req)
    if args is None:
        return None
    if not isinstance(args, list):
        raise PayloadError(f"expected a JSON array of arguments, got {type(args).__name__}")
    return args


def as_text(value: Any) -> str:
    """String form of one argument; empty for null."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return json.dumps(value)


def as_id(value: Any) -> str:
    """An id argument: a string, or a number taken as its text."""
    if isinstance(value, (dict, list)):
        raise PayloadError("candidacy id must be a string")
    return as_text(value)


def rpc_handler(*, failure: str, serialize_failure: str | None = None) -> Callable:
    """Decorator: turns ``fn(self, req) -> RPCResult`` into a host-facing handler.

    The wrapped method is called as ``handler(host, request_id, req)`` and
    answers through ``host.return_`` exactly once; nothing escapes it.
    """

    def decorator(fn: Callable[[Any, str | None], RPCResult]) -> Callable:
        @functools.wraps(fn)
        def wrapper(self: Any, host: Any, request_id: str, req: str | None = None) -> None:
            try:
                result = fn(self, req)
                payload = result.to_json()
            except (json.JSONDecodeError, PayloadError, ValidationError) as exc:
                log.warning("%s: malformed request: %s", fn.__qualname__, exc)
                result = RPCResult.error(INVALID_JSON)
                payload = result.to_json()
            except SerializationError as exc:
                log.error("%s: could not serialize response: %s", fn.__qualname__, exc)
                result = RPCResult.error(serialize_failure or failure)
                payload = result.to_json()
            except Exception as exc:
                log.exception("%s failed: %s", fn.__qualname__, exc)
                result = RPCResult.error(failure)
                payload = result.to_json()
            host.return_(request_id, result.result_type, payload)

        return wrapper

    return decorator
