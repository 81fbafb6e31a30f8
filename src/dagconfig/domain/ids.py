"""Identifier type and key matching rules.

Identifiers are opaque strings. Equality is exact by default; the
tolerate-miscased-keys policy additionally accepts a case-insensitive match
(``"ABC"`` vs. ``"abc"``). The policy is a value passed by the caller, never
module-level state.

Case-insensitive matching is simple folding: characters are compared one by
one, so ``"straße"`` does not match ``"STRASSE"`` (a full case fold would
expand ``ß`` to ``ss``).
"""

from __future__ import annotations

# Opaque string-backed key for a Service or Relationship.
Identifier = str


def _chars_fold_equal(a: str, b: str) -> bool:
    """Check whether two single characters are equal under simple case folding."""
    return a == b or a.lower() == b.lower() or a.upper() == b.upper()


def fold_equal(candidate: str, query: str) -> bool:
    """Compare *candidate* and *query* ignoring case, character by character."""
    if len(candidate) != len(query):
        return False
    return all(_chars_fold_equal(a, b) for a, b in zip(candidate, query, strict=True))


def keys_match(candidate: str, query: str, *, tolerate_miscased: bool = False) -> bool:
    """Check whether *candidate* matches *query*.

    Exact equality is tried first. Only when that fails and
    *tolerate_miscased* is set are the keys compared ignoring case.
    """
    if candidate == query:
        return True
    return tolerate_miscased and fold_equal(candidate, query)
