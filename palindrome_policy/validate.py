"""Admission handlers: validate pods and validate policy settings."""

from __future__ import annotations

import json
import logging
from typing import Any

from .palindrome import is_palindrome
from .settings import (
    AllowedPalindromeError,
    Settings,
    SettingsError,
    settings_from_validation_request,
)

HTTP_BAD_REQUEST = 400

_logger = logging.getLogger(__name__)


def _encode(response: dict[str, Any]) -> bytes:
    return json.dumps(response, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def accept_request() -> bytes:
    """Encode a response accepting the admission request."""
    return _encode({"accepted": True})


def reject_request(message: str | None, code: int | None) -> bytes:
    """Encode a response rejecting the admission request."""
    response = {"accepted": False, "message": message, "code": code}
    return _encode({k: v for k, v in response.items() if v is not None})


def accept_settings() -> bytes:
    """Encode a response declaring the settings valid."""
    return _encode({"valid": True})


def reject_settings(message: str | None) -> bytes:
    """Encode a response declaring the settings invalid."""
    response = {"valid": False, "message": message}
    return _encode({k: v for k, v in response.items() if v is not None})


def _parse_validation_request(payload: bytes | str) -> dict[str, Any]:
    document = json.loads(payload) or {}
    if not isinstance(document, dict):
        raise ValueError(f"validation request must be a JSON object, got {type(document).__name__}")
    request = document.get("request")
    if request is not None and not isinstance(request, dict):
        raise ValueError(f"request must be a JSON object, got {type(request).__name__}")
    return document


def _label_keys(metadata: Any) -> list[str]:
    """Return label keys; entries of non-object labels have empty keys."""
    if not isinstance(metadata, dict) or "labels" not in metadata:
        return []
    labels = metadata["labels"]
    if isinstance(labels, dict):
        return list(labels)
    return [""] * len(labels) if isinstance(labels, list) else [""]


def validate(payload: bytes | str) -> bytes:
    """Reject pods whose label keys are palindromes not allowed by the settings."""
    try:
        document = _parse_validation_request(payload)
        settings = settings_from_validation_request(document)
    except ValueError as err:
        _logger.error("could not process validation request: %s", err)
        return reject_request(str(err), HTTP_BAD_REQUEST)

    pod = (document.get("request") or {}).get("object")
    metadata = pod.get("metadata") if isinstance(pod, dict) else None
    for key in _label_keys(metadata):
        if is_palindrome(key) and not settings.is_allowed_palindrome(key):
            _logger.info(
                "could not validate pod, palindrome label keys found (allowed: %s)",
                ",".join(settings.allowed_palindromes),
            )
            return reject_request(
                f"pod label with key {key} not allowed, the word is a palindrome", None
            )
    return accept_request()


def validate_settings(payload: bytes | str) -> bytes:
    """Check that the policy settings decode and hold only palindromes."""
    try:
        settings = Settings.from_mapping(json.loads(payload))
    except ValueError as err:
        _logger.error("could not unmarshal policy settings: %s", err)
        return reject_settings(f"policy settings not valid, error during the unmarshal: {err}")
    try:
        settings.validate()
    except AllowedPalindromeError as err:
        _logger.error("policy settings not valid: %s", err)
        return reject_settings(f"provided settings are not valid: {err}")
    return accept_settings()