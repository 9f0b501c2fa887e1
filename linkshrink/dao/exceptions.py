"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    DataStoreError:
        Raised when the data store cannot be read or written (e.g. connection
        issues, timeouts, OOM, full disk, etc.).

    CorruptedCollectionError:
        Raised when the persisted link collection cannot be decoded.

Example:
    >>> from linkshrink.dao.exceptions import DataStoreError
    >>> raise DataStoreError('Failed to save data')
    Traceback (most recent call last):
        ...
    linkshrink.dao.exceptions.DataStoreError: Failed to save data
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, OOM, etc.
    """

    error_code = 'dao:data_store_error'


class CorruptedCollectionError(DAOError):
    """Exception raised when the persisted collection is not a valid list of link records."""

    error_code = 'dao:corrupted_collection_error'
