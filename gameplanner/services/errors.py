"""
Planning errors for the Game Planner.

Each error carries a user-facing message. The planner service turns them
into result values instead of letting them abort a request.
"""


class PlanningError(Exception):
    """Base class for conditions that prevent a plan from being produced."""

    default_message = "Error: Unable to generate a plan."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InsufficientPlayersError(PlanningError):
    """Active roster cannot fill the outfield spots plus a goalkeeper."""

    default_message = "Error: Not enough players to fill the formation spots."


class InvalidDurationError(PlanningError):
    """Match duration is zero or negative."""

    default_message = "Error: Match duration must be greater than zero."


class ConfigurationError(PlanningError):
    """Unknown game format, or a formation not listed for the format."""

    default_message = "Error: Unknown game format or formation."
