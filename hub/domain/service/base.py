"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services hold no per-browser state: anything a request needs to carry
    across redirects goes through the stores.
    """
