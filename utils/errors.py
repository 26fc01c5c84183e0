"""
Exception hierarchy for inventory planning.
"""


class PlanningError(Exception):
    pass


class InvalidArgumentError(PlanningError, ValueError):
    """Raised in strict mode when an input breaks a calculator contract."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message)
        self.errors = errors or []
