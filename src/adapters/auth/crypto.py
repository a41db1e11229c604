import hashlib
import hmac

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

CREDENTIAL_SCHEMES = ("sha1", "argon2")


class Sha1CredentialHasher:
    """
    Unsalted single-round SHA-1 hex digest.

    Matches the digests already stored for existing accounts: the same
    secret always yields the same digest, and verification recomputes and
    compares. Not suitable for new deployments; see Argon2CredentialHasher.
    """

    scheme = "sha1"

    def digest(self, secret: str) -> str:
        return hashlib.sha1(secret.encode("utf-8")).hexdigest()

    def verify(self, secret: str, digest: str) -> bool:
        return hmac.compare_digest(self.digest(secret), digest)


class Argon2CredentialHasher:
    """Salted argon2id hashes; digests differ per call, verify() compares."""

    scheme = "argon2"

    def __init__(self) -> None:
        self.ph = PasswordHasher()

    def digest(self, secret: str) -> str:
        return str(self.ph.hash(secret))

    def verify(self, secret: str, digest: str) -> bool:
        try:
            self.ph.verify(digest, secret)
            return True
        except (VerificationError, InvalidHashError):
            return False


def build_hasher(scheme: str) -> Sha1CredentialHasher | Argon2CredentialHasher:
    if scheme == "sha1":
        return Sha1CredentialHasher()
    if scheme == "argon2":
        return Argon2CredentialHasher()
    raise ValueError(f"Unknown credential scheme: {scheme}. Must be one of: {CREDENTIAL_SCHEMES}")
