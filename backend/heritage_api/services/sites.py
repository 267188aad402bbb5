import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from heritage_api.errors import InternalFailure
from heritage_api.models.site import HeritageSite

logger = logging.getLogger(__name__)


class SiteCatalog:
    """Read-only queries over the heritage site dataset."""

    def __init__(self, session: Session):
        self.session = session

    def list_by_country(self, country: str | None = None) -> list[HeritageSite]:
        statement = select(HeritageSite).order_by(HeritageSite.id)
        if country:
            statement = statement.where(
                col(HeritageSite.country_name).icontains(country, autoescape=True)
            )
        return self._run(statement)

    def get_by_location(self, location: str) -> list[HeritageSite]:
        statement = (
            select(HeritageSite)
            .where(col(HeritageSite.location).icontains(location, autoescape=True))
            .order_by(HeritageSite.id)
        )
        return self._run(statement)

    def _run(self, statement) -> list[HeritageSite]:
        try:
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            logger.exception("Store error while querying heritage sites")
            raise InternalFailure(
                {"message": "Could not query heritage sites"}, envelope="body"
            ) from e
