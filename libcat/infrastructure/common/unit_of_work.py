"""SQLAlchemy implementation of the unit of work port."""

from types import TracebackType

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from libcat.application.common.unit_of_work import UnitOfWork
from libcat.exceptions import UpstreamError


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of work backed by the request's database session transaction."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise UpstreamError(f"Failed to commit transaction: {e.__class__.__name__}") from e

    def rollback(self) -> None:
        self.db.rollback()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Rollback on error and surface datastore failures as UpstreamError."""
        super().__exit__(exc_type, exc_val, exc_tb)
        if isinstance(exc_val, SQLAlchemyError):
            raise UpstreamError(
                f"Datastore operation failed: {exc_val.__class__.__name__}"
            ) from exc_val
