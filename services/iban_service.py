"""MCP tool exposing the IBAN length and MOD-97-10 check."""
from __future__ import annotations

from fastmcp import FastMCP
from pydantic import BaseModel, Field

from iban_checker import check_iban
from mcp_framework import log_interaction


class IbanResult(BaseModel):
    valid: bool
    iban: str
    country: str | None = None
    expected_length: int | None = Field(
        default=None, description="Length configured for the country code."
    )
    remainder: int | None = Field(
        default=None, description="MOD-97 remainder; 1 means the checksum holds."
    )
    reason: str | None = None


def register_iban_service(mcp: FastMCP) -> None:
    """Register the ``iban_check`` tool on the provided MCP instance."""

    @mcp.tool()
    def iban_check(iban: str) -> IbanResult:
        """
        Check an IBAN's length for its country and its MOD-97-10 checksum.

        Args:
            iban: IBAN without spaces; the country code must be upper case

        Returns:
            IbanResult with the verdict and the step that decided it
        """

        request = {"iban": iban}
        try:
            result = IbanResult.model_validate(check_iban(iban))
        except ValueError as exc:
            log_interaction(
                "iban_check_error",
                request,
                {"error": str(exc), "type": exc.__class__.__name__},
            )
            raise

        log_interaction("iban_check", request, result.model_dump(exclude_none=True))
        return result
