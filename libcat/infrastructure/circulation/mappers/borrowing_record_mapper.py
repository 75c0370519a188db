from libcat.domain.circulation.entities.borrowing_record import BorrowingRecord
from libcat.domain.common.value_objects.ids import BorrowingRecordId, Isbn
from libcat.models import BorrowingRecord as BorrowingRecordORM
from libcat.utils import ensure_utc, ensure_utc_or_none


class BorrowingRecordMapper:
    """BorrowingRecord ORM to domain conversion."""

    def to_domain(self, orm_model: BorrowingRecordORM) -> BorrowingRecord:
        return BorrowingRecord.create_with_id(
            id=BorrowingRecordId(orm_model.id),
            isbn=Isbn(orm_model.isbn),
            borrowed_at=ensure_utc(orm_model.borrowed_at),
            returned_at=ensure_utc_or_none(orm_model.returned_at),
        )

    def to_orm(
        self, domain_entity: BorrowingRecord, orm_model: BorrowingRecordORM | None = None
    ) -> BorrowingRecordORM:
        if orm_model:
            # Only the return timestamp is mutable
            orm_model.returned_at = domain_entity.returned_at
            return orm_model

        return BorrowingRecordORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            isbn=domain_entity.isbn.value,
            borrowed_at=domain_entity.borrowed_at,
            returned_at=domain_entity.returned_at,
        )
