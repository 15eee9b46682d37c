from typing import Any


class ApproxAssertionError(AssertionError):
    """Raised when two values are expected to be approximately equal and are not."""

    def __init__(self, left: Any, right: Any, message: str) -> None:
        self.left = left
        self.right = right
        super().__init__(message)
