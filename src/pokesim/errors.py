"""Exceptions raised by pokesim."""


class PokesimError(Exception):
    """Base for all pokesim errors."""


class ProfileNotFound(PokesimError):
    """The provider has no combatant under this identifier."""

    def __init__(self, identifier: str):
        super().__init__(f"Pokemon not found: {identifier}")
        self.identifier = identifier


class ProviderUnavailable(PokesimError):
    """The backing data source failed (network error, bad status, timeout)."""

    def __init__(self, identifier: str, detail: str):
        super().__init__(f"Could not resolve '{identifier}': {detail}")
        self.identifier = identifier
        self.detail = detail


class BattleCancelled(PokesimError):
    """A battle was aborted between turns by a deadline or cancel event."""

    def __init__(self, turn: int, reason: str = "cancelled"):
        super().__init__(f"Battle {reason} before turn {turn}")
        self.turn = turn
        self.reason = reason
