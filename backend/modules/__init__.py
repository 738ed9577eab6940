"""
Feature modules for the Platewise backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the service and its storage
- models.py: Pydantic models for data transfer
- repository.py: Supabase queries
- service.py: Business logic implementation
- routes.py: FastAPI route handlers
- exceptions.py: Module-specific exceptions

The suggestions module reaches preferences, meal history and the pantry
inventory only through their service interfaces.
"""
