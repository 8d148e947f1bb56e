"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business rules that span an entity's repository
    calls, such as ownership checks and tree walks.
    """

    pass
