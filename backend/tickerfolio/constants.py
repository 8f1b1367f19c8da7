"""Application constants to avoid magic numbers."""


class PasswordLimits:
    """Password length rules shared by schemas and services."""

    MIN_LENGTH = 6
    # bcrypt only accepts 72 bytes of input
    MAX_BYTES = 72


class AssetLimits:
    """Bounds on stored asset fields."""

    TICKER_MAX_LENGTH = 20
    # Largest value a signed 64-bit INTEGER column holds
    QUANTITY_MAX = 2**63 - 1
    PRICE_MAX = 1e12
