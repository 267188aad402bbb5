import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from heritage_api.errors import DuplicateKeyError
from heritage_api.models.user import User

logger = logging.getLogger(__name__)

TOKEN_INDEX = "ix_users_access_token"


def duplicated_field(error: IntegrityError) -> str:
    """Name the users column whose unique index rejected the write."""
    constraint = getattr(getattr(error.orig, "diag", None), "constraint_name", None)
    if constraint:
        return "access_token" if constraint == TOKEN_INDEX else "username"
    # SQLite lists the failing columns and never the offending values
    return "access_token" if "users.access_token" in str(error.orig) else "username"


class CredentialStore:
    """Persisted users, looked up by username or by access token.

    Uniqueness of ``username`` and ``access_token`` is left to the unique
    indexes on the ``users`` table, so concurrent writers cannot both win.
    """

    def __init__(self, session: Session):
        self.session = session

    def find_by_username(self, username: str) -> User | None:
        return self.session.exec(
            select(User).where(User.username == username)
        ).first()

    def find_by_token(self, token: str) -> User | None:
        return self.session.exec(
            select(User).where(User.access_token == token)
        ).first()

    def create(self, username: str, password_hash: str) -> User:
        user = User(username=username, password_hash=password_hash)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            field = duplicated_field(e)
            logger.info(f"Rejected duplicate {field} on user create")
            raise DuplicateKeyError(field) from e
        self.session.refresh(user)
        return user
