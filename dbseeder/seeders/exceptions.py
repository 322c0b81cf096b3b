class SeedingError(RuntimeError):
    """Raised when a generator cannot run, e.g. its parent table is empty."""
