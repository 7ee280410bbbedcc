"""Policy settings: the palindromes that pods may use as label keys."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .palindrome import is_palindrome


class SettingsError(ValueError):
    """Raised when policy settings cannot be decoded."""


class AllowedPalindromeError(ValueError):
    """Raised when a configured allowed palindrome is not a palindrome."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(
            f"{field} is not a palindrome, it could not be used as allowed palindrome"
        )


@dataclass(frozen=True)
class Settings:
    """Settings of the palindrome label policy."""

    allowed_palindromes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "allowed_palindromes", tuple(self.allowed_palindromes))

    @classmethod
    def from_mapping(cls, data: Any) -> Settings:
        """Build settings from decoded JSON; ``None`` yields empty settings."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise SettingsError(f"settings must be a JSON object, got {type(data).__name__}")
        values = data.get("allowed_palindromes")
        if values is None:
            return cls()
        if not isinstance(values, list) or not all(
            v is None or isinstance(v, str) for v in values
        ):
            raise SettingsError("allowed_palindromes must be a list of strings")
        return cls(tuple(v or "" for v in values))

    def validate(self) -> None:
        """Raise AllowedPalindromeError for the first entry that is not a palindrome."""
        for candidate in self.allowed_palindromes:
            if not is_palindrome(candidate):
                raise AllowedPalindromeError(candidate)

    def is_allowed_palindrome(self, palindrome: str) -> bool:
        """Return True if ``palindrome`` is explicitly allowed."""
        return palindrome in self.allowed_palindromes


def settings_from_validation_request(validation_request: Mapping[str, Any]) -> Settings:
    """Extract the policy settings from a decoded validation request."""
    prefix = "could not create a settings from a validation request"
    if not isinstance(validation_request, Mapping) or "settings" not in validation_request:
        raise SettingsError(f"{prefix}: missing settings")
    try:
        return Settings.from_mapping(validation_request["settings"])
    except SettingsError as err:
        raise SettingsError(f"{prefix}: {err}") from err