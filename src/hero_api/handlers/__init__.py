"""Handler layer for HTTP endpoints.

Handlers depend on the HeroStore protocol, not on a concrete repository.

Architecture:
    Handler -> Store
    (HTTP)  -> (Data Access)
"""

from .hero_handler import HeroHandler

__all__ = [
    "HeroHandler",
]
