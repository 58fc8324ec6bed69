"""Domain service base class."""


class Service:
    """Marker base for domain services.

    Services take repositories and settings in ``__init__`` and are built
    per request by the DI container.
    """
