"""
API dependencies for dependency injection
"""

from typing import Generator
from fastapi import Request
from sqlalchemy.orm import Session


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Sessions come from the factory built at startup and kept on app.state,
    so every request shares the process-wide connection pool.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
