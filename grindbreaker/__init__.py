"""GrindBreaker: file-backed profile and candidacy storage behind RPC bindings."""

__version__ = "0.1.0"
