from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class RecordOperation(str, Enum):
    ADD = "add"
    UPDATE = "update"


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

class Credentials(BaseModel):
    """Login and API credentials for one Creator application."""

    model_config = ConfigDict(frozen=True)

    login_id: str
    password: str = Field(repr=False)
    api_key: str = Field(repr=False)
    application_name: Optional[str] = None


@dataclass
class Session:
    """The ticket issued by the accounts service, if any."""

    ticket: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.ticket is not None

    def activate(self, ticket: Optional[str]) -> None:
        self.ticket = ticket

    def clear(self) -> None:
        self.ticket = None


class OperationError(BaseModel):
    code: Optional[str] = None
    message: Optional[str] = None


class OperationResult(BaseModel):
    """
    Uniform result of every client operation.

    success=True never carries an error; success=False always does, even
    when both of its fields are unknown.
    """

    raw_response: Any = None
    success: bool
    updated: Optional[bool] = None
    api_ticket: Optional[str] = None
    error: Optional[OperationError] = None
    method: Optional[str] = None

    @model_validator(mode="after")
    def _check_error_matches_success(self) -> "OperationResult":
        if self.success and self.error is not None:
            raise ValueError("a successful result cannot carry an error")
        if not self.success and self.error is None:
            raise ValueError("a failed result must carry an error")
        return self

    @classmethod
    def failure(cls, raw_response: Any, code: Optional[str] = None, message: Optional[str] = None) -> "OperationResult":
        return cls(
            raw_response=raw_response,
            success=False,
            error=OperationError(code=code, message=message),
        )

    def with_method(self, method: str) -> "OperationResult":
        return self.model_copy(update={"method": method})

    def as_dict(self) -> Dict[str, Any]:
        """Render only the keys that apply to this result."""
        out: Dict[str, Any] = {"raw_response": self.raw_response, "success": self.success}
        if self.updated is not None:
            out["updated"] = self.updated
        if self.api_ticket is not None:
            out["api_ticket"] = self.api_ticket
        if self.error is not None:
            out["error"] = {"code": self.error.code, "message": self.error.message}
        if self.method is not None:
            out["method"] = self.method
        return out


# ---------------------------------------------------------------------------
# Abstract transport interface
# ---------------------------------------------------------------------------

class CreatorTransport(ABC):
    """Every transport used by ZohoCreatorClient must implement this interface."""

    @abstractmethod
    def send(self, url: str, form_fields: Optional[Mapping[str, Any]] = None) -> Optional[str]:
        """
        POST form_fields to url, or GET url when no fields are given.

        Returns the response body, or None when no response reached the
        client.
        """
