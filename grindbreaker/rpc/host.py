"""Window-host abstraction the RPC handlers answer through."""
from __future__ import annotations

import json
import uuid
from abc import ABC, abstractmethod
from typing import Any, Callable, TextIO

from grindbreaker.log import get_logger
from grindbreaker.rpc.result import RPCResult, RPCResultType

log = get_logger(__name__)

Binding = Callable[[str, str], None]


class Host(ABC):
    """Registers named functions and delivers responses by request id."""

    @abstractmethod
    def bind(self, name: str, fn: Binding) -> None:
        pass

    @abstractmethod
    def return_(self, request_id: str, result: RPCResultType, json_body: str) -> None:
        pass


class LocalHost(Host):
    """In-process host: call bindings directly, read answers back.

    ``responses`` holds answers delivered outside ``call()``; ``call()`` takes
    its own answer out again.
    """

    def __init__(self) -> None:
        self.bindings: dict[str, Binding] = {}
        self.responses: dict[str, tuple[RPCResultType, str]] = {}

    def bind(self, name: str, fn: Binding) -> None:
        self.bindings[name] = fn

    def return_(self, request_id: str, result: RPCResultType, json_body: str) -> None:
        self.responses[request_id] = (result, json_body)

    def call(self, name: str, *args: Any) -> dict[str, Any]:
        """Invoke a binding like the UI would and return the decoded envelope."""
        fn = self.bindings.get(name)
        if fn is None:
            raise KeyError(f"No function bound as {name!r}")
        request_id = uuid.uuid4().hex
        fn(request_id, json.dumps(list(args)))
        _, body = self.responses.pop(request_id)
        return json.loads(body)


class StdioHost(Host):
    """Line-oriented host for development shells and scripted use.

    Reads ``{"id": ..., "method": ..., "params": [...]}`` lines and writes
    ``{"id": ..., "result": "Success"|"Error", "json": "<envelope>"}`` lines.
    """

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.bindings: dict[str, Binding] = {}

    def bind(self, name: str, fn: Binding) -> None:
        self.bindings[name] = fn

    def return_(self, request_id: str, result: RPCResultType, json_body: str) -> None:
        line = json.dumps({"id": request_id, "result": result.name, "json": json_body})
        self.stdout.write(line + "\n")
        self.stdout.flush()

    def serve(self) -> int:
        """Handle requests until EOF; returns the number handled."""
        handled = 0
        for raw in self.stdin:
            raw = raw.strip()
            if not raw:
                continue
            try:
                request = json.loads(raw)
                request_id = str(request["id"])
                method = request["method"]
                params = request.get("params", [])
            except (ValueError, KeyError, TypeError) as exc:
                log.warning("Skipping malformed request line: %s", exc)
                continue
            fn = self.bindings.get(method)
            if fn is None:
                log.warning("No function bound as %r", method)
                self.return_(request_id, RPCResultType.Error, RPCResult.error(f"Unknown method: {method}").to_json())
            else:
                fn(request_id, json.dumps(params))
            handled += 1
        return handled
