# errors.py
from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a wheel, plugboard or machine cannot be built as asked."""
