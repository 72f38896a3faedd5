"""
Parsed response shapes.

Zoho answers in three unrelated formats:
- accounts login/logout: newline separated KEY=VALUE text
- record add/update: <response><result><form><add|update><status>
- record errors: <response><errorlist><error><code>

Each body is parsed into exactly one of the shapes below before being
normalized into an OperationResult (see policy/response_wrappers.py).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class TextKeyValue:
    raw: str
    params: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class AddResult:
    raw: str
    status: str


@dataclass(frozen=True)
class UpdateResult:
    raw: str
    status: str


@dataclass(frozen=True)
class ErrorListResult:
    raw: str
    code: Optional[str]


@dataclass(frozen=True)
class TransportFailure:
    """No response body reached the client."""

    raw: Any = None


@dataclass(frozen=True)
class UnrecognizedResult:
    """A body that matched none of the known record shapes."""

    raw: str


ParsedResponse = Union[
    TextKeyValue,
    AddResult,
    UpdateResult,
    ErrorListResult,
    TransportFailure,
    UnrecognizedResult,
]
