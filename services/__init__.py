"""Reusable MCP services."""

from .iban_service import IbanResult, register_iban_service

__all__ = ["IbanResult", "register_iban_service"]
