"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

WHY Dependency Injection?
=========================
1. Testing: Tests swap in a fresh store or a fixed year through
   app.dependency_overrides
2. Separation of Concerns: Routes never reach for global state
3. Reusability: Write once, use in many routes
"""

from datetime import date
from typing import Annotated

from fastapi import Depends, Request

from library_api.config import Settings, get_settings
from library_api.services.store import BookStore


def get_book_store(request: Request) -> BookStore:
    """
    Provide the application's book store.

    The store is created by create_app() and kept on app.state.
    """
    return request.app.state.book_store


def get_reference_year() -> int:
    """
    Latest publication year accepted by validation.

    Read per request so a long-running process follows the calendar.
    """
    return date.today().year


# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def list_books(store: BookStore = Depends(get_book_store)):
#
# You can write:
#   def list_books(store: Store):

Store = Annotated[BookStore, Depends(get_book_store)]
CurrentYear = Annotated[int, Depends(get_reference_year)]
AppSettings = Annotated[Settings, Depends(get_settings)]
