"""Domain errors raised by the service layer."""


class AuthenticationError(Exception):
    """Login attempt failed: unknown email or wrong password."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BusinessRuleError(Exception):
    """An application rule was violated (duplicate email, invalid entry, ...)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
