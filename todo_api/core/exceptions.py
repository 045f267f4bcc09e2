# todo_api/core/exceptions.py

class AppError(Exception):
    """
    Application-level validation failure (duplicate username, missing password, ...).
    The message is safe to show to the client.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message
