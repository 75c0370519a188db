"""
Infrastructure layer.

Implementations of the ports defined in the application layer and
everything that talks to the outside world:

- Persistence (SQLAlchemy repositories, mappers, unit of work)
- Web framework (FastAPI routers, schemas, exception handlers)
- File input (CSV row reader)
- Dependency injection

This layer depends on the domain and application layers,
but they do not depend on it.
"""
