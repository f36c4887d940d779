"""Browser service errors."""


class BrowserError(Exception):
    """Failure of a browser lifecycle or page operation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @classmethod
    def wrap(cls, action: str, error: BaseException) -> "BrowserError":
        """
        Build an error for a failed driver call.

        Args:
            action: What was being attempted, e.g. "Failed to close browser"
            error: The underlying driver exception

        Returns:
            BrowserError with message "<action>: <cause>"
        """
        cause = getattr(error, "message", None)
        if not isinstance(cause, str) or not cause:
            cause = str(error)
        return cls(f"{action}: {cause}")
