# app/core/exceptions.py


class StoreError(Exception):
    """
    Raised by a registry store when the backing database call fails.

    `message` is safe to show to guests; the original exception is kept
    as __cause__ for logging.
    """

    def __init__(self, message: str = "Could not reach the gift list right now. Please try again."):
        self.message = message
        super().__init__(self.message)
