"""Composable MCP instance hosting the IBAN service."""
from __future__ import annotations

from mcp_framework import ServiceDefinition, create_mcp_server
from services import register_iban_service

services = [
    ServiceDefinition(
        name="iban",
        description="Validate IBAN strings by country length and MOD-97-10 checksum.",
        register=register_iban_service,
    ),
]

mcp = create_mcp_server(services)
