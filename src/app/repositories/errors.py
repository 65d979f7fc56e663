"""
Storage Engine Errors

Raised by repository implementations; translated to Result errors by use cases.
"""


class StorageError(Exception):
    """Base class for storage engine failures"""

    code = "STORAGE_ERROR"


class StorageUnavailable(StorageError):
    """Transient infrastructure fault (connection loss, lock contention, timeout)"""

    code = "STORAGE_UNAVAILABLE"


class StorageRejected(StorageError):
    """Store refused the write as malformed; upstream validation should prevent this"""

    code = "STORAGE_REJECTED"
