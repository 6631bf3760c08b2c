"""Application layer - Use cases and orchestration.

Structure:
- commands/: Command dataclasses and handlers (intake hand-off)
- queries/: Filter/sort projection of the collection
- services/: ApplicationStore, ReviewSession, Announcer

The application layer orchestrates domain logic but contains no business rules.
"""
