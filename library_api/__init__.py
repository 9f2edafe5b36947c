"""
Library API Application Package

An HTTP service for managing an in-memory collection of books,
with CRUD endpoints and bulk import from CSV files.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- errors.py: Error types raised by services and mapped to HTTP responses
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- models/: Book record and candidate types
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Business logic (store, validation, CSV import, rate limiting)
"""

__version__ = "0.1.0"
