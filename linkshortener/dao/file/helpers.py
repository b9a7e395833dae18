import functools
from typing import TypeVar, Any
from collections.abc import Callable

from linkshortener.dao.exceptions import StorageWriteError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def handle_storage_error(method: F) -> F:
    """Wrap file-interacting DAO methods to handle OS errors

    Args:
        method (Callable[..., Any]):
            DAO method performing file operations which may raise OSError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises StorageWriteError on file system issues.

    Example:
        >>> @handle_storage_error
        ... def load(self):
        ...     return self.path.read_text()
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except OSError as e:
            raise StorageWriteError(f"Can't access links file at {self.path} ({e.strerror or e}).") from e

    return wrapper
