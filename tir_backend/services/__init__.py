from .account_service import AccountService
from .account_store import AccountStore
from .thematics_client import ThematicsClient

__all__ = ['AccountService', 'AccountStore', 'ThematicsClient']
