"""Centralized error transformation for API routes.

Logical failures are reported in the response body while the HTTP status stays
200; the dashboard front-end reads ``error`` from the payload and treats any
non-2xx as an opaque transport failure.
"""

from typing import Any

from brainapi.domain.shared.error import BrainError

ERROR_STATUS_CODE = 200


def map_brain_error(error: BrainError) -> dict[str, Any]:
    """Map a BrainError to the ``{"error": ...}`` body returned to clients."""
    return {"error": error.message}
