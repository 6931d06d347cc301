"""Command-line arguments with redactable fragments.

Fragments are kept in order. Each is either a plain string or a secret
(``PrivateString`` or pydantic ``SecretStr``). The private form is what gets
executed; the public form is what gets displayed.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import SecretStr

from proclaunch.security.private_string import PrivateString

Fragment = str | PrivateString


class SecureArguments:
    """Ordered argument fragments composable into real or redacted command lines."""

    def __init__(self, *fragments: str | PrivateString | SecretStr) -> None:
        self._fragments: list[Fragment] = [self._coerce(fragment) for fragment in fragments]

    @property
    def private_arguments(self) -> str | None:
        """Returns the real command line, or None when there are no fragments."""

        return self._join(self.private_argv())

    @property
    def public_arguments(self) -> str | None:
        """Returns the redacted command line, or None when there are no fragments."""

        return self._join(self.public_argv())

    def private_argv(self) -> list[str]:
        """Returns one real value per fragment, for argv-style execution."""

        return [
            fragment.private_value if isinstance(fragment, PrivateString) else fragment
            for fragment in self._fragments
        ]

    def public_argv(self) -> list[str]:
        """Returns one display value per fragment, secrets replaced by the marker."""

        return [
            fragment.public_value if isinstance(fragment, PrivateString) else fragment
            for fragment in self._fragments
        ]

    def append(self, fragment: str | PrivateString | SecretStr) -> None:
        self._fragments.append(self._coerce(fragment))

    def __add__(self, other: object) -> SecureArguments:
        if isinstance(other, SecureArguments):
            return SecureArguments(*self._fragments, *other._fragments)
        if isinstance(other, (str, PrivateString, SecretStr)):
            return SecureArguments(*self._fragments, other)
        return NotImplemented

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)

    def __str__(self) -> str:
        return self.public_arguments or ""

    def __repr__(self) -> str:
        return f"SecureArguments({self.public_argv()!r})"

    @staticmethod
    def _coerce(fragment: object) -> Fragment:
        if isinstance(fragment, SecretStr):
            return PrivateString.from_secret(fragment)
        if isinstance(fragment, (str, PrivateString)):
            return fragment
        raise TypeError(
            "Argument fragments must be str, PrivateString or SecretStr, "
            f"got: {type(fragment).__name__}"
        )

    @staticmethod
    def _join(values: list[str]) -> str | None:
        if not values:
            return None
        return " ".join(values)
