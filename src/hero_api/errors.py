"""Error types shared across layers."""


class StoreIOError(Exception):
    """Raised by a hero store when the underlying storage cannot be read or written.

    Repositories chain the original exception (``raise StoreIOError(...) from e``)
    so the cause stays visible in logs. Handlers catch it and answer 500.
    """
