"""Custom exception hierarchy for realty-store."""


class RealtyStoreError(Exception):
    """Base exception for all realty-store errors."""


class EntityNotFoundError(RealtyStoreError):
    """Raised when a referenced entity does not exist."""


class AccountNotFoundError(EntityNotFoundError):
    """Raised when no account matches the given email or id."""


class ListingNotFoundError(EntityNotFoundError):
    """Raised when no listing matches the given id."""


class DuplicateAccountError(RealtyStoreError):
    """Raised when an account with the same email already exists."""


class InvalidCredentialError(RealtyStoreError):
    """Raised when a password does not match the stored credential."""


class CorruptStateError(RealtyStoreError):
    """Raised when persisted content cannot be parsed back."""


class ValidationError(RealtyStoreError):
    """Raised when input data is missing fields or holds invalid values."""


class ConfigurationError(RealtyStoreError):
    """Raised when configuration is invalid or missing."""


class StorageError(RealtyStoreError):
    """Raised when the key-value substrate fails to read or write."""
