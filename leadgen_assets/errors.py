"""Error taxonomy: bad input vs. failed generation."""


class LeadGenError(Exception):
    """Base class for errors surfaced to the user as a 400."""


class ValidationError(LeadGenError):
    """Request payload failed validation. `fields` holds the offending wire names."""

    def __init__(self, fields: list[str], message: str | None = None):
        self.fields = list(fields)
        if message is None:
            message = "Invalid or missing field(s): " + ", ".join(self.fields)
        super().__init__(message)


class GenerationError(LeadGenError):
    """
    Asset generation failed as a whole.

    reason is one of "timeout", "backend_unavailable", "invalid_response".
    """

    def __init__(self, reason: str, detail: str = ""):
        self.reason = reason
        self.detail = detail
        message = f"Failed to generate assets ({reason})"
        if detail:
            message += f": {detail}"
        super().__init__(message)
