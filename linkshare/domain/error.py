"""Domain layer errors.

Every error a caller can observe carries a stable ``code`` which the GraphQL
layer exposes as ``extensions.code``.
"""


class DomainError(Exception):
    """Base domain error."""

    code = "DOMAIN_ERROR"


class InvalidCredentialError(DomainError):
    """Raised when a bearer credential is malformed, forged or expired.

    The identity resolver swallows this into an anonymous caller.
    """

    code = "INVALID_CREDENTIAL"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid credential: {reason}")


class UnauthenticatedError(DomainError):
    """Raised when an operation requires a caller and none is present."""

    code = "UNAUTHENTICATED"

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class OutOfRangeError(DomainError):
    """Raised when a pagination argument lies outside its allowed range."""

    code = "OUT_OF_RANGE"

    def __init__(self, argument: str, value: int, minimum: int, maximum: int | None):
        self.argument = argument
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        if maximum is None:
            message = (
                f"'{argument}' argument value '{value}' must be at least '{minimum}'."
            )
        else:
            message = (
                f"'{argument}' argument value '{value}' is outside the valid range "
                f"of '{minimum}' to '{maximum}'."
            )
        super().__init__(message)


class LinkNotFoundError(DomainError):
    """Raised when a comment or vote targets a link that does not exist."""

    code = "LINK_NOT_FOUND"

    def __init__(self, link_id: str, action: str = "post comment"):
        self.link_id = link_id
        super().__init__(f"Cannot {action} on non-existing link with id '{link_id}'.")


class UserNotFoundError(DomainError):
    """Raised when logging in with an unknown email."""

    code = "USER_NOT_FOUND"

    def __init__(self, email: str):
        self.email = email
        super().__init__("No such user found")


class InvalidPasswordError(DomainError):
    """Raised when a password does not match the stored hash."""

    code = "INVALID_PASSWORD"

    def __init__(self):
        super().__init__("Invalid password")


class AlreadyVotedError(DomainError):
    """Raised when a user votes twice for the same link."""

    code = "ALREADY_VOTED"

    def __init__(self, link_id: int):
        self.link_id = link_id
        super().__init__(f"Already voted for link: {link_id}")


class EmailAlreadyRegisteredError(DomainError):
    """Raised when signing up with an email that already has an account."""

    code = "EMAIL_ALREADY_REGISTERED"

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"An account with email '{email}' already exists")


class PasswordTooLongError(DomainError):
    """Raised when a password exceeds what bcrypt can hash."""

    code = "PASSWORD_TOO_LONG"

    def __init__(self, max_bytes: int):
        self.max_bytes = max_bytes
        super().__init__(f"Password must not be longer than {max_bytes} bytes")
