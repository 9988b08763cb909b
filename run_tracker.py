#!/usr/bin/env python3
"""Entry point: wire repositories into RPC handlers and serve them over stdio."""
from __future__ import annotations

import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

# stdout carries responses; keep log lines off it.
os.environ.setdefault("LOG_TO_STDERR", "1")

from grindbreaker.config import get_binding_prefix, get_data_dir, load_settings
from grindbreaker.log import get_logger

log = get_logger(__name__)


def build_host(data_dir: Path | None = None):
    from grindbreaker.repositories import CandidacyRepository, ProfileRepository
    from grindbreaker.rpc import CandidacyRPC, ProfileRPC, StdioHost, bind_rpcs

    settings = load_settings()
    data_dir = data_dir or get_data_dir(settings)

    # Built once here and handed to the handlers; nothing is global.
    profile_rpc = ProfileRPC(ProfileRepository(data_dir))
    candidacy_rpc = CandidacyRPC(CandidacyRepository(data_dir))

    host = StdioHost(sys.stdin, sys.stdout)
    bind_rpcs(host, profile_rpc, candidacy_rpc, prefix=get_binding_prefix(settings))
    log.info("Data directory: %s", data_dir)
    return host


if __name__ == "__main__":
    data_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    handled = build_host(data_dir).serve()
    log.info("Stdin closed after %d requests.", handled)
