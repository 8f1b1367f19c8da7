"""Repository layer - data access abstraction.

Repositories handle all database queries, providing a clean interface
for services. Services should use repositories for data access rather
than directly querying SQLAlchemy models.

- Repositories: Pure data access (queries, creates, updates), flush only
- Services: Business logic and transaction boundaries (commit)

Dependency direction: Services -> Repositories -> Models
"""

from .asset_repository import AssetRepository
from .exceptions import DuplicateError, RepositoryError
from .user_repository import UserRepository

__all__ = [
    "AssetRepository",
    "DuplicateError",
    "RepositoryError",
    "UserRepository",
]
