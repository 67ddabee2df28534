# tir_backend/services/account_store.py
"""
Account Store - persistence of Account rows
Every lookup ignores soft-deleted accounts.
"""
from datetime import datetime, timezone
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from tir_backend.models import Account
from tir_backend.services.errors import Conflict, StoreError

logger = logging.getLogger(__name__)


class AccountStore:
    """Account persistence bound to a SQLAlchemy session"""

    def __init__(self, session):
        self.session = session

    def _live(self):
        return self.session.query(Account).filter(Account.deleted_at.is_(None))

    def _first(self, *criteria):
        try:
            return self._live().filter(*criteria).first()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"[AccountStore] lookup failed: {e}", exc_info=True)
            raise StoreError() from e

    def find_by_email(self, email):
        return self._first(Account.email == email)

    def find_by_api_key(self, api_key):
        if not api_key:
            return None
        return self._first(Account.api_key == api_key)

    def find_by_id(self, account_id):
        return self._first(Account.id == account_id)

    def create(self, account):
        """
        Insert a new account

        Raises:
            Conflict: a live account already uses this email
            StoreError: any other database failure
        """
        if self.find_by_email(account.email) is not None:
            raise Conflict()

        self.session.add(account)
        self._commit("create")
        return account

    def save(self, account):
        """Persist every field of an already loaded account"""
        self.session.add(account)
        self._commit("save")
        return account

    def soft_delete(self, account):
        account.deleted_at = datetime.now(timezone.utc)
        self.session.add(account)
        self._commit("soft_delete")

    def _commit(self, operation):
        try:
            self.session.commit()
        except IntegrityError as e:
            # The partial unique index on email is the only constraint a
            # well-formed account can trip
            self.session.rollback()
            logger.info(f"[AccountStore] {operation}: email already in use")
            raise Conflict() from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"[AccountStore] {operation} failed: {e}", exc_info=True)
            raise StoreError() from e
