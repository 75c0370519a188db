"""
Application layer.

The application layer orchestrates domain objects. Each use case class
implements one operation of the catalog, circulation, reporting or import
components and receives its repositories and unit of work through its
constructor.

This layer contains:
- Use cases: one class per operation
- Protocols: ports for the repositories the use cases depend on
- Common: pagination and the unit of work interface
"""
