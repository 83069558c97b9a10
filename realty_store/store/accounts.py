"""Account store: user records, credentials and the active session."""

import logging

from realty_store.config import AccountConfig
from realty_store.credentials import CredentialStore, PlaintextCredentialStore
from realty_store.exceptions import (
    AccountNotFoundError,
    CorruptStateError,
    DuplicateAccountError,
    InvalidCredentialError,
    ValidationError,
)
from realty_store.models import User, UserRole
from realty_store.storage.base import KeyValueStorage
from realty_store.storage.serialization import user_from_dict
from realty_store.store.base import Clock, IdFactory, KeyValueRepository, new_id, utc_now
from realty_store.validation import validate_registration

logger = logging.getLogger(__name__)

USERS_KEY = "real_estate_users"
CURRENT_USER_KEY = "real_estate_current_user"


def normalize_email(email: str) -> str:
    """Comparison form of an address: trimmed and case-folded."""
    return email.strip().casefold()


class AccountStore(KeyValueRepository):
    """Manage accounts, credential checks and the single current session.

    Parameters
    ----------
    storage : KeyValueStorage
        Substrate holding the account collection and the session slot.
    config : AccountConfig | None
        Admin sentinel address and password rules.
    credentials : CredentialStore | None
        Secret storage; defaults to plaintext entries in ``storage``.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        config: AccountConfig | None = None,
        credentials: CredentialStore | None = None,
        *,
        on_corrupt: str = "reset",
        clock: Clock = utc_now,
        id_factory: IdFactory = new_id,
    ) -> None:
        super().__init__(storage, on_corrupt=on_corrupt, clock=clock, id_factory=id_factory)
        self.config = config or AccountConfig()
        self.credentials = credentials or PlaintextCredentialStore(storage)

    # Collection

    def list_users(self) -> list[User]:
        """Get all accounts in creation order."""
        return self._read_collection(USERS_KEY, user_from_dict)

    def replace_users(self, users: list[User]) -> None:
        """Overwrite the whole account collection."""
        self._write_collection(USERS_KEY, list(users))

    def get_user(self, user_id: str) -> User | None:
        """Get an account by id."""
        return next((u for u in self.list_users() if u.id == user_id), None)

    def get_user_by_email(self, email: str) -> User | None:
        """Get an account by email, ignoring case and surrounding spaces."""
        wanted = normalize_email(email)
        return next((u for u in self.list_users() if normalize_email(u.email) == wanted), None)

    def create_user(self, email: str, password: str, name: str) -> User:
        """Register a new account.

        The configured admin address gets the admin role; every other
        account is regular.

        Raises
        ------
        DuplicateAccountError
            If an account with the same email exists.
        """
        users = self.list_users()
        wanted = normalize_email(email)
        if any(normalize_email(u.email) == wanted for u in users):
            raise DuplicateAccountError(f"Account {email} already exists")

        is_admin = wanted == normalize_email(self.config.admin_email)
        user = User(
            id=self._id_factory(),
            email=email.strip(),
            name=name,
            role=UserRole.ADMIN if is_admin else UserRole.REGULAR,
            created_at=self._clock(),
        )
        users.append(user)
        self.replace_users(users)
        self.credentials.set_secret(user.id, password)

        logger.info("Created %s account %s", user.role.value, user.id)
        return user

    def update_profile(
        self,
        user_id: str,
        *,
        name: str | None = None,
        email: str | None = None,
    ) -> User:
        """Change the name and/or email of an account.

        The session slot is refreshed when it holds the edited account.
        The role is left as it was.
        """
        users = self.list_users()
        index = next((i for i, u in enumerate(users) if u.id == user_id), None)
        if index is None:
            raise AccountNotFoundError(f"Account {user_id} not found")

        user = users[index]
        if email is not None:
            wanted = normalize_email(email)
            if any(normalize_email(u.email) == wanted and u.id != user_id for u in users):
                raise DuplicateAccountError(f"Account {email} already exists")
            user.email = email.strip()
        if name is not None:
            user.name = name
        self.replace_users(users)

        current = self.get_current_user()
        if current is not None and current.id == user_id:
            self.set_current_user(user)

        logger.info("Updated profile of account %s", user_id)
        return user

    def register(self, email: str, password: str, confirm_password: str, name: str) -> User:
        """Check a sign-up form against the account rules, then create the account.

        Raises
        ------
        ValidationError
            If the form fails ``validate_registration`` with the configured
            minimum password length.
        DuplicateAccountError
            If an account with the same email exists.
        """
        validate_registration(
            email, password, confirm_password, name,
            min_length=self.config.min_password_length,
        )
        return self.create_user(email, password, name)

    def delete_user(self, user_id: str) -> None:
        """Remove an account and its credential.

        The session slot is cleared when it holds the removed account.

        Raises
        ------
        AccountNotFoundError
            If no account has ``user_id``.
        """
        users = self.list_users()
        remaining = [u for u in users if u.id != user_id]
        if len(remaining) == len(users):
            raise AccountNotFoundError(f"Account {user_id} not found")
        self.replace_users(remaining)
        self.credentials.remove(user_id)

        current = self.get_current_user()
        if current is not None and current.id == user_id:
            self.logout()

        logger.info("Deleted account %s", user_id)

    # Credentials

    def login(self, email: str, password: str) -> User:
        """Authenticate and open a session.

        Raises
        ------
        AccountNotFoundError
            If no account has this email.
        InvalidCredentialError
            If the password does not match.
        """
        user = self.get_user_by_email(email)
        if user is None:
            raise AccountNotFoundError(f"Account {email} not found")
        if not self.credentials.verify(user.id, password):
            logger.info("Rejected login for account %s", user.id)
            raise InvalidCredentialError("Incorrect password")

        self.set_current_user(user)
        logger.info("Account %s logged in", user.id)
        return user

    def change_password(self, user_id: str, current_password: str, new_password: str) -> None:
        """Replace a password after checking the current one.

        The new password must have at least ``config.min_password_length``
        characters, otherwise ``ValidationError`` is raised.
        """
        if self.get_user(user_id) is None:
            raise AccountNotFoundError(f"Account {user_id} not found")
        if not self.credentials.verify(user_id, current_password):
            raise InvalidCredentialError("Current password is incorrect")
        min_length = self.config.min_password_length
        if len(new_password) < min_length:
            raise ValidationError(f"Password must be at least {min_length} characters")
        self.credentials.set_secret(user_id, new_password)
        logger.info("Changed password of account %s", user_id)

    # Session

    def logout(self) -> None:
        """Clear the session slot. Safe to call when already logged out."""
        self.storage.remove_item(CURRENT_USER_KEY)

    def get_current_user(self) -> User | None:
        """Get the session account; ``None`` when absent or unreadable."""
        try:
            return self._read_record(CURRENT_USER_KEY, user_from_dict)
        except CorruptStateError:
            logger.warning("Session slot is corrupt, treating it as logged out")
            return None

    def set_current_user(self, user: User) -> None:
        """Overwrite the session slot."""
        self._write_record(CURRENT_USER_KEY, user)

    def is_authenticated(self) -> bool:
        return self.get_current_user() is not None

    def is_admin(self) -> bool:
        user = self.get_current_user()
        return user is not None and user.role == UserRole.ADMIN
