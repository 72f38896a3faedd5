"""
Response normalization for the Zoho Creator integration.

Raw bodies are first parsed into one of the shapes in
contracts/responses.py, then turned into an OperationResult by the
normalizer for that shape. Nothing here raises on a bad response: every
failure becomes OperationResult.error, with the raw body kept for
diagnosis.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup

from zoho_creator.integrations.contracts.interfaces import OperationResult, RecordOperation
from zoho_creator.integrations.contracts.responses import (
    AddResult,
    ErrorListResult,
    ParsedResponse,
    TextKeyValue,
    TransportFailure,
    UnrecognizedResult,
    UpdateResult,
)
from zoho_creator.integrations.policy.error_codes import NO_RECORDS_FOUND_CODE, lookup_error

logger = logging.getLogger(__name__)

TRANSPORT_FAILURE_CODE = "400"
TRANSPORT_FAILURE_MESSAGE = "Bad Request."

SUCCESS_STATUS = "Success"

# Zoho has no search call, so an update that matches nothing is only
# recognisable by this exact status text. If Zoho rewords it, update here.
NO_RECORDS_FOUND_STATUS = "Failure, No Records Found With Specified Criteria"


def is_no_records_found(status: Optional[str]) -> bool:
    return status == NO_RECORDS_FOUND_STATUS


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_session_text(raw: Any) -> ParsedResponse:
    """Parse an accounts login/logout body into KEY=VALUE pairs."""
    if not raw:
        return TransportFailure(raw=raw)

    params: Dict[str, str] = {}
    for line in str(raw).splitlines():
        line = line.strip()
        # The accounts service prefixes the body with a "#<timestamp>" comment.
        if not line or line.startswith("#"):
            continue
        key, _, value = line.partition("=")
        params[key] = value
    return TextKeyValue(raw=raw, params=params)


def parse_record_xml(raw: Any, operation: RecordOperation) -> ParsedResponse:
    """Parse an add/update XML body into one of the record shapes."""
    if not raw:
        return TransportFailure(raw=raw)

    try:
        soup = BeautifulSoup(raw, "xml")
    except Exception as e:
        logger.error(f"Error parsing Zoho Creator XML: {type(e).__name__} - {str(e)}")
        return UnrecognizedResult(raw=raw)

    root = soup.find(True, recursive=False)
    if root is None:
        return UnrecognizedResult(raw=raw)

    status = _find_path(root, "result", "form", operation.value, "status")
    if status is not None:
        text = status.get_text(strip=True)
        if operation is RecordOperation.UPDATE:
            return UpdateResult(raw=raw, status=text)
        return AddResult(raw=raw, status=text)

    code = _find_path(root, "errorlist", "error", "code")
    if code is not None:
        return ErrorListResult(raw=raw, code=code.get_text(strip=True) or None)

    return UnrecognizedResult(raw=raw)


def _find_path(node, *names):
    for name in names:
        if node is None:
            return None
        node = node.find(name, recursive=False)
    return node


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

def normalize_session_response(raw: Any) -> OperationResult:
    return normalize_parsed(parse_session_text(raw))


def normalize_record_response(raw: Any, operation: RecordOperation) -> OperationResult:
    return normalize_parsed(parse_record_xml(raw, operation), operation)


def normalize_parsed(parsed: ParsedResponse, operation: Optional[RecordOperation] = None) -> OperationResult:
    if isinstance(parsed, TransportFailure):
        return _normalize_transport_failure(parsed)
    if isinstance(parsed, TextKeyValue):
        return _normalize_text(parsed)
    if isinstance(parsed, AddResult):
        return _normalize_status(parsed.raw, parsed.status, RecordOperation.ADD)
    if isinstance(parsed, UpdateResult):
        return _normalize_status(parsed.raw, parsed.status, RecordOperation.UPDATE)
    if isinstance(parsed, ErrorListResult):
        return _normalize_error_list(parsed, operation)
    if isinstance(parsed, UnrecognizedResult):
        logger.warning("Unrecognized Zoho Creator response shape")
        return OperationResult.failure(parsed.raw)
    raise TypeError(f"Unsupported parsed response: {type(parsed).__name__}")


def _normalize_transport_failure(parsed: TransportFailure) -> OperationResult:
    return OperationResult.failure(
        parsed.raw,
        code=TRANSPORT_FAILURE_CODE,
        message=TRANSPORT_FAILURE_MESSAGE,
    )


def _normalize_text(parsed: TextKeyValue) -> OperationResult:
    params = parsed.params
    if params.get("RESULT") == "TRUE":
        return OperationResult(
            raw_response=parsed.raw,
            success=True,
            api_ticket=params.get("TICKET") or None,
        )

    message = None
    for key in ("CAUSE", "WARNING"):
        value = params.get(key)
        if value and value != "null":
            message = value
            break
    logger.warning(f"Zoho accounts request failed: {message}")
    return OperationResult.failure(parsed.raw, message=message)


def _normalize_status(raw: str, status: str, operation: RecordOperation) -> OperationResult:
    if status == SUCCESS_STATUS:
        return OperationResult(
            raw_response=raw,
            success=True,
            updated=True if operation is RecordOperation.UPDATE else None,
        )

    if is_no_records_found(status):
        return _finalize(raw, operation, NO_RECORDS_FOUND_CODE, lookup_error(NO_RECORDS_FOUND_CODE))
    return _finalize(raw, operation, None, status)


def _normalize_error_list(parsed: ErrorListResult, operation: Optional[RecordOperation]) -> OperationResult:
    return _finalize(parsed.raw, operation, parsed.code, lookup_error(parsed.code))


def _finalize(
    raw: str,
    operation: Optional[RecordOperation],
    code: Optional[str],
    message: Optional[str],
) -> OperationResult:
    if operation is RecordOperation.UPDATE and code == NO_RECORDS_FOUND_CODE:
        logger.info("Update matched no records")
        return OperationResult(raw_response=raw, success=True, updated=False)

    logger.warning(f"Zoho Creator {operation.value if operation else 'request'} failed: code={code} message={message}")
    return OperationResult.failure(raw, code=code, message=message)
