"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- Inverts dependencies: the Core depends on abstractions, the CLI and
  tests can swap in any implementation.
"""

from core.interfaces.backend import AccountGateway, MovieCatalog

__all__ = ["AccountGateway", "MovieCatalog"]
