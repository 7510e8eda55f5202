class LinkageStoreError(RuntimeError):
    """Raised when the persistence engine fails a save, find or delete."""
