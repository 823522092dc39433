"""Password hashing port.

Credential handling belongs to the auth collaborator; the domain only asks
for an opaque hash and never stores the plain password.
"""


class PasswordHasher:
    """Generic password hasher interface."""

    def hash(self, password: str) -> str:
        """Hash a plain-text password.

        Args:
            password: Plain-text password

        Returns:
            Opaque credential safe to persist
        """
        raise NotImplementedError

    def verify(self, password_hash: str, password: str) -> bool:
        """Check a plain-text password against a stored hash.

        Args:
            password_hash: Hash previously returned by ``hash``
            password: Plain-text password to check

        Returns:
            True if the password matches
        """
        raise NotImplementedError
