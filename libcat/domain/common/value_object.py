"""
Value objects of the library domain.

A value object has no identity of its own: ISBNs, record ids and the
Active/Deleted book status are all values. Subclasses are declared as
frozen dataclasses, which gives them field-wise equality and hashing.
"""

from dataclasses import fields


class ValueObject:
    """Marker base for immutable domain values."""

    def __repr__(self) -> str:
        values = ((f.name, getattr(self, f.name)) for f in fields(self))  # type: ignore[arg-type]
        attrs = ", ".join(f"{name}={value!r}" for name, value in values)
        return f"{self.__class__.__name__}({attrs})"
