"""Domain models and entities.

Why:
- Pure data structures (Pydantic v2) and the domain error live here.
- The domain knows nothing about HTTP, CLI or SDKs: only problem concepts.
"""

from core.domain.errors import OperationFailed
from core.domain.models import Movie

__all__ = ["Movie", "OperationFailed"]
