"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services wrap repositories with tracing and hold the rules that
    need storage access, such as uniqueness checks and batched counts.
    """

    pass
