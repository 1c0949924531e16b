"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a runtime entity cannot be created."""


class InvalidBattleActionError(Exception):
    """Raised when a battle action cannot be applied to the current session."""


class CharacterError(Exception):
    """Raised when a character change (name, equipment) is rejected."""
