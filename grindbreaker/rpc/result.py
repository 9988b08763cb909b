"""The uniform envelope every RPC call answers with."""
from __future__ import annotations

import json
from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class RPCResultType(IntEnum):
    """Transport-level tag handed to the host next to the JSON body."""

    Success = 0
    Error = 1


class SerializationError(Exception):
    """The envelope could not be rendered as JSON."""


def _wire(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_wire(v) for v in value]
    return value


@dataclass
class RPCResult:
    is_error: bool = False
    error_message: str | None = None
    data: Any = None
    not_found: bool = False

    @classmethod
    def success(cls, data: Any) -> RPCResult:
        return cls(is_error=False, data=data)

    @classmethod
    def error(cls, message: str | None) -> RPCResult:
        return cls(is_error=True, error_message=message)

    @classmethod
    def not_found(cls) -> RPCResult:
        """Successful answer whose body says the record does not exist."""
        return cls(is_error=False, not_found=True)

    @property
    def result_type(self) -> RPCResultType:
        return RPCResultType.Error if self.is_error else RPCResultType.Success

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "isError": self.is_error,
            "errorMessage": self.error_message,
            "data": _wire(self.data),
        }
        if self.not_found:
            body["notFound"] = True
        return body

    def to_json(self) -> str:
        try:
            return json.dumps(self.to_dict(), allow_nan=False, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise SerializationError(str(exc)) from exc
