"""Utilities for composing an in-process FastMCP instance from IBAN services.

The instance name is read from ``IBAN_CHECKER_APP_NAME`` (defaults to
``"IBAN Checker"``). No transport is started here; callers talk to the instance in memory.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Iterable

from fastmcp import FastMCP

APP_NAME = os.getenv("IBAN_CHECKER_APP_NAME", "IBAN Checker")

INTERACTION_LOGGER = "iban_checker.interactions"

logger = logging.getLogger(INTERACTION_LOGGER)


@dataclass
class ServiceDefinition:
    """Describe a service that can register tools on a FastMCP instance."""

    name: str
    description: str
    register: Callable[[FastMCP], None]


def log_interaction(action: str, input_data: Any, output_data: Any) -> None:
    """Emit a structured log entry on the interaction logger (JSON Lines).

    Objects that are not JSON serializable are stringified instead of
    breaking the log line.
    """

    entry = {
        "timestamp": datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z",
        "action": action,
        "input": input_data,
        "output": output_data,
    }

    try:
        serialized = json.dumps(entry, ensure_ascii=False)
    except TypeError:
        sanitized_entry = {
            "timestamp": entry["timestamp"],
            "action": entry["action"],
            "input": json.loads(json.dumps(entry["input"], default=str)),
            "output": json.loads(json.dumps(entry["output"], default=str)),
        }
        serialized = json.dumps(sanitized_entry, ensure_ascii=False)

    logger.info(serialized)


def create_mcp_server(
    services: Iterable[ServiceDefinition],
    *,
    app_name: str = APP_NAME,
) -> FastMCP:
    """Create an MCP instance and register all provided services."""

    services = list(services)
    mcp = FastMCP(app_name)

    for service in services:
        service.register(mcp)

    log_interaction(
        "startup",
        {"services": [service.name for service in services]},
        {"app": app_name},
    )
    return mcp
