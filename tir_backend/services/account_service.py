# tir_backend/services/account_service.py
"""
Account Service - Business logic for user accounts
Handles: Register, Login, API key auth, Profile, Password, Role, Delete
"""
import logging

from tir_backend.models import Account, Role
from tir_backend.services.errors import (
    Conflict,
    InternalError,
    InvalidCredentials,
    InvalidRole,
    NotFound,
    Unauthorized,
    ValidationError,
)
from tir_backend.utils.security import (
    DEFAULT_API_KEY_LENGTH,
    EntropyError,
    check_password,
    generate_api_key,
    hash_password,
)
from tir_backend.utils.validation import validate_password

logger = logging.getLogger(__name__)

_DUMMY_HASH = hash_password("Dummy!Passw0rd")


class AccountService:
    def __init__(self, store, api_key_length=DEFAULT_API_KEY_LENGTH):
        self.store = store
        self.api_key_length = api_key_length

    def register(self, email, password):
        """
        Register a new account with the Member role

        Raises:
            ValidationError: password fails the strength rules
            Conflict: email already used by a live account
            InternalError: hashing, key generation or store failure
        """
        # 1. Validation
        if not validate_password(password):
            raise ValidationError()

        # 2. Hash and mint the bearer key
        try:
            password_hash = hash_password(password)
        except ValueError as e:
            logger.error(f"[Account] Password hashing failed: {e}")
            raise InternalError() from e
        del password

        try:
            api_key = generate_api_key(self.api_key_length)
        except EntropyError as e:
            logger.error(f"[Account] API key generation failed: {e}")
            raise InternalError() from e

        # 3. Persist; the store rejects duplicate emails
        account = Account(
            email=email,
            password_hash=password_hash,
            role=int(Role.MEMBER),
            api_key=api_key,
        )
        try:
            self.store.create(account)
        except Conflict:
            logger.info("[Account] Registration rejected: e-mail already exists")
            raise

        logger.info(f"[Account] Registered account {account.id}")
        return account

    def authenticate(self, email, password):
        """
        Login with email and password

        Every failure raises the same InvalidCredentials, whichever check failed.
        """
        if not validate_password(password):
            raise InvalidCredentials()

        account = self.store.find_by_email(email)
        if account is None:
            # Same bcrypt cost as a wrong password
            check_password(password, _DUMMY_HASH)
            raise InvalidCredentials()

        if not check_password(password, account.password_hash):
            raise InvalidCredentials()

        return account

    def authenticate_by_api_key(self, api_key):
        """Resolve the account owning a bearer API key"""
        if not api_key:
            raise Unauthorized()

        account = self.store.find_by_api_key(api_key)
        if account is None or account.api_key != api_key:
            raise Unauthorized()

        return account

    def get_account(self, account_id):
        account = self.store.find_by_id(account_id)
        if account is None:
            raise NotFound()
        return account

    def update_profile(self, account_id, email, bio=None, full_name=None):
        """Overwrite email, bio and full name of an account"""
        account = self.get_account(account_id)

        account.email = email
        account.bio = bio
        account.full_name = full_name

        return self.store.save(account)

    def update_password(self, account_id, api_key, new_password):
        """
        Change the password of the account owning api_key

        Raises:
            NotFound: no such account
            Unauthorized: api_key belongs to someone else
            ValidationError: new password fails the strength rules
        """
        account = self.get_account(account_id)

        # Owner check
        if account.api_key != api_key:
            raise Unauthorized()

        if not validate_password(new_password):
            raise ValidationError()

        try:
            account.password_hash = hash_password(new_password)
        except ValueError as e:
            logger.error(f"[Account] Password hashing failed: {e}")
            raise InternalError() from e

        logger.info(f"[Account] Password changed for account {account.id}")
        return self.store.save(account)

    def add_role(self, account_id, role_name):
        """Replace the role of an account (role_name: 'Member' or 'SUPERVISOR')"""
        account = self.get_account(account_id)

        try:
            role = Role.from_name(role_name)
        except ValueError:
            raise InvalidRole()

        account.role = int(role)
        logger.info(f"[Account] Account {account.id} role set to {role.display_name}")
        return self.store.save(account)

    def delete(self, account_id):
        account = self.get_account(account_id)
        self.store.soft_delete(account)
        logger.info(f"[Account] Account {account.id} deleted")
        return {'success': True}
