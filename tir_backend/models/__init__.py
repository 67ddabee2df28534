from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

from .base import Base
from .account import Account, Role
