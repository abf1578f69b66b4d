"""
Common Password Matcher
=======================

Flags passwords that are, or trivially disguise, a well-known weak
password. Disguise detection is a naive leetspeak reversal: every digit in
the substitution table is replaced by the letter it usually stands in for
(``p4ssw0rd`` -> ``password``) before the set lookup.

The reversal is context-free, so an unrelated string that happens to
normalize to a listed password is also flagged.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

COMMON_PASSWORDS: frozenset[str] = frozenset(
    {"password", "123456", "qwerty", "letmein", "admin", "welcome"}
)

SUBSTITUTIONS: Mapping[str, str] = MappingProxyType(
    {"0": "o", "1": "i", "3": "e", "4": "a", "5": "s", "7": "t"}
)

_TRANSLATION = str.maketrans(dict(SUBSTITUTIONS))


def normalize(password: str) -> str:
    """Lowercase *password* and undo the leetspeak substitutions."""
    return password.lower().translate(_TRANSLATION)


class CommonPatternMatcher:
    """Membership test against the common-password set.

    Args:
        extra_passwords: Additional weak passwords for this matcher only.
            They are lowercased; the module-level set is left untouched.
    """

    def __init__(self, extra_passwords: Iterable[str] = ()) -> None:
        self._passwords = COMMON_PASSWORDS | frozenset(p.lower() for p in extra_passwords)

    @property
    def passwords(self) -> frozenset[str]:
        return self._passwords

    def is_common(self, password: str) -> bool:
        """Exact membership of the password as typed."""
        return password in self._passwords

    def matches(self, password: str) -> bool:
        """True if the lowercased or the normalized form is a common password."""
        lowered = password.lower()
        return lowered in self._passwords or normalize(password) in self._passwords
