"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    StorageCorruptionError:
        Raised when the durable links file cannot be parsed.

    StorageWriteError:
        Raised when the durable links file cannot be written or read
        (e.g., disk full, missing permissions).

Example:
    >>> from linkshortener.dao.exceptions import StorageWriteError
    >>> raise StorageWriteError("Can't write links file at data/links.json.")
    Traceback (most recent call last):
        ...
    linkshortener.dao.exceptions.StorageWriteError: Can't write links file at data/links.json.
"""

from linkshortener.exceptions import LinkShortenerError


class DAOError(LinkShortenerError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class StorageCorruptionError(DAOError):
    """Exception raised when the links file holds something other than a JSON object of strings."""

    error_code = 'dao:storage_corruption_error'


class StorageWriteError(DAOError):
    """Exception raised when the links file cannot be accessed.

    e.g. disk full, permission denied, path is a directory, etc.
    """

    error_code = 'dao:storage_write_error'
