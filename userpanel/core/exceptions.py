"""Authentication errors raised by the service layer and handled in main."""


class AuthenticationError(Exception):
    """Base class for failed login or missing credentials."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class BadCredentialsError(AuthenticationError):
    """Unknown email or wrong password."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password.")


class DisabledAccountError(AuthenticationError):
    """The account exists but is not usable for login."""

    def __init__(self) -> None:
        super().__init__("Account is disabled.")


class NotAuthenticatedError(AuthenticationError):
    """A protected route was requested without a valid session or token."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__("Not authenticated")
