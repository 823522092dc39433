"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span the user store and the claim
    ledger rather than belonging to a single entity.
    """

    pass
