"""Secret string values that never render their content.

A ``PrivateString`` only reveals its value through ``private_value``. Every
display path (``str``, ``repr``, ``format``) yields the redaction marker, so the
value can be passed around, logged, or embedded in error messages safely.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import SecretStr

REDACTION_MARKER = "<hidden>"


@dataclass(frozen=True)
class PrivateString:
    """Immutable holder for a confidential string."""

    _value: str = field(repr=False)

    @classmethod
    def from_secret(cls, secret: SecretStr) -> PrivateString:
        """Adopts a pydantic ``SecretStr`` without exposing it on the way."""

        return cls(secret.get_secret_value())

    @property
    def private_value(self) -> str:
        """Returns the real value. Call sites should be deliberate."""

        return self._value

    @property
    def public_value(self) -> str:
        return REDACTION_MARKER

    def __str__(self) -> str:
        return REDACTION_MARKER

    def __repr__(self) -> str:
        return f"PrivateString({REDACTION_MARKER!r})"

    def __format__(self, format_spec: str) -> str:
        return format(REDACTION_MARKER, format_spec)
