"""Argon2 password hashing adapter."""

from .hasher import Argon2PasswordHasher

__all__ = ["Argon2PasswordHasher"]
