"""Database configuration module."""
from fastapi import Request
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def get_store(request: Request):
    """Dependency for the transaction store attached to the application."""
    return request.app.state.store
