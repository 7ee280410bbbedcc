"""Palindrome detection for label keys and settings values."""


def is_palindrome(word: str) -> bool:
    """Return True if ``word`` reads the same backwards, ignoring case."""
    normalized = word.lower()
    return normalized == normalized[::-1]