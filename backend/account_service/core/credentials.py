"""Credential Hasher — static-salted SHA-256 digests and their verifier.

Invariants:
    - hash() is deterministic: same plaintext + salt → same 64-char lowercase hex digest
    - verify() compares in constant time (hmac.compare_digest)
    - Plaintext is never stored, logged, or returned
    - hash() never raises for str input: unpaired surrogates digest as U+FFFD

Design Decisions:
    - Salt is one application-wide value injected from Settings, appended to the
      plaintext before digesting. Digests already stored by earlier deployments were
      produced this way, so the scheme is kept as-is.
      KNOWN WEAKNESS: identical passwords share a digest and precomputed dictionaries
      apply. Moving to per-user salts (or a KDF) invalidates every stored digest and
      needs a migration plan first.
"""

import hashlib
import hmac

from account_service.core.domain_types import PasswordDigest


class PasswordHasher:
    """One-way password transform with a fixed salt."""

    def __init__(self, salt: str):
        self._salt = salt

    def hash(self, plaintext: str) -> PasswordDigest:
        digest = hashlib.sha256(_utf8(plaintext + self._salt)).hexdigest()
        return PasswordDigest(digest)

    def verify(self, plaintext: object, stored_digest: str) -> bool:
        """True iff hash(plaintext) equals the stored digest. Non-str plaintext never matches."""
        if not isinstance(plaintext, str) or not isinstance(stored_digest, str):
            return False
        return hmac.compare_digest(
            self.hash(plaintext).encode("ascii"),
            stored_digest.encode("utf-8"),
        )


def _utf8(text: str) -> bytes:
    """UTF-8 bytes with lone surrogates written as U+FFFD."""
    return (
        text.encode("utf-16-le", "surrogatepass")
        .decode("utf-16-le", "replace")
        .encode("utf-8")
    )
