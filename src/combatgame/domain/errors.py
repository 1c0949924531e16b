"""Domain-level exceptions."""


class DomainError(Exception):
    """Base exception for domain rule violations."""


class InvalidEntityConfigurationError(DomainError, ValueError):
    """Raised when a combat entity would be built or mutated into an invalid state."""


class InvalidItemError(DomainError, ValueError):
    """Raised when an item or enchantment definition has impossible values."""


class InventoryError(DomainError):
    """Raised when an inventory operation refers to items that cannot be used."""
