"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business rules that span repositories or need
    collaborators such as token signing or password hashing.
    """

    pass
