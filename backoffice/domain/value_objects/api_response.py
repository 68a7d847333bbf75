"""ApiResponse value object — the {success, data, message} envelope."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ApiResponse:
    success: bool
    data: Any = None
    message: str | None = None

    @classmethod
    def ok(cls, data: Any = None, message: str | None = None) -> "ApiResponse":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str) -> "ApiResponse":
        return cls(success=False, message=message)

    @classmethod
    def from_dict(cls, payload: Any) -> "ApiResponse":
        """Build from a decoded JSON body.

        Raises:
            ValueError: if the body is not an object with a boolean ``success``.
        """
        if not isinstance(payload, dict) or not isinstance(payload.get("success"), bool):
            raise ValueError("Malformed response envelope")
        message = payload.get("message")
        return cls(
            success=payload["success"],
            data=payload.get("data"),
            message=str(message) if message is not None else None,
        )

    def to_dict(self) -> dict:
        return {"success": self.success, "data": self.data, "message": self.message}

    def records(self) -> list[dict]:
        """Data as a list of records; anything else yields an empty list."""
        if self.success and isinstance(self.data, list):
            return [r for r in self.data if isinstance(r, dict)]
        return []
