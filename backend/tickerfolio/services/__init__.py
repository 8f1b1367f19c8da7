"""Services layer - business logic.

- auth_service: password hashing and token issuing/verification
- account_service: registration, login, password change, account deletion
- asset_service: ownership-scoped asset CRUD
- portfolio/: pure metrics engine
- repositories/: data access layer

Common imports for convenience:
    from tickerfolio.services import AccountService, AssetService, AuthService
"""

from tickerfolio.services.account_service import AccountService, AuthResult
from tickerfolio.services.asset_service import AssetService
from tickerfolio.services.auth_service import AuthService
from tickerfolio.services.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServiceError,
    UnauthorizedError,
    ValidationError,
)

__all__ = [
    "AccountService",
    "AssetService",
    "AuthResult",
    "AuthService",
    # Errors
    "ConflictError",
    "ForbiddenError",
    "NotFoundError",
    "ServiceError",
    "UnauthorizedError",
    "ValidationError",
]
