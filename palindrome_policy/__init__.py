"""Admission policy that rejects pods with palindrome label keys."""

__version__ = "0.1.0"

__all__ = ["cli", "palindrome", "settings", "validate"]