"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from finserv_calculators.config import settings
from finserv_calculators.domain.models import MoratoriumPolicy


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_moratorium_policy() -> MoratoriumPolicy:
    """Configured handling for moratoriums that consume the whole tenure"""
    return MoratoriumPolicy(settings.moratorium_policy)
