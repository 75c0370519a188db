from libcat.domain.common.value_objects.ids import Isbn
from libcat.domain.library.entities.book import Book
from libcat.models import Book as BookORM
from libcat.utils import ensure_utc, ensure_utc_or_none


class BookMapper:
    """Book ORM to domain conversion."""

    def to_domain(self, orm_model: BookORM) -> Book:
        """Convert ORM model to domain entity."""
        return Book.create_with_id(
            id=Isbn(orm_model.isbn),
            title=orm_model.title,
            author=orm_model.author,
            publication_year=orm_model.publication_year,
            copies_in_stock=orm_model.copies_in_stock,
            created_at=ensure_utc(orm_model.created_at),
            updated_at=ensure_utc(orm_model.updated_at),
            deleted_at=ensure_utc_or_none(orm_model.deleted_at),
        )

    def to_orm(self, domain_entity: Book, orm_model: BookORM | None = None) -> BookORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing; the ISBN is the primary key and never changes
            orm_model.title = domain_entity.title
            orm_model.author = domain_entity.author
            orm_model.publication_year = domain_entity.publication_year
            orm_model.copies_in_stock = domain_entity.copies_in_stock
            orm_model.deleted_at = domain_entity.deleted_at
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        return BookORM(
            isbn=domain_entity.id.value,
            title=domain_entity.title,
            author=domain_entity.author,
            publication_year=domain_entity.publication_year,
            copies_in_stock=domain_entity.copies_in_stock,
            deleted_at=domain_entity.deleted_at,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
