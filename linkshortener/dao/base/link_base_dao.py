"""Abstract base class for link mapping data access objects (DAOs).

This class establishes a consistent contract for the durable mirror of the
link mapping, regardless of the underlying storage mechanism.

Responsibilities:
    - Provide an interface for loading and saving the whole `short id -> long URL` mapping.
    - Standardize error handling across storage implementations.

Example:
    Typical usage with a storage-specific implementation:

        >>> from linkshortener.dao.file import LinksFileDAO
        >>> dao = LinksFileDAO(data_dir='./data', file_name='links.json')
        >>> dao.save({'k3x9q0': 'https://example.com/blog/article-123'})
        <LinksFileDAO>
        >>> dao.load()
        {'k3x9q0': 'https://example.com/blog/article-123'}
"""

from abc import ABC, abstractmethod


class LinkBaseDAO(ABC):
    """Interface for link mapping data access objects (DAOs).

    Methods:
        load(**kwargs) -> dict[str, str]:
            Read the whole mapping from the data store.
            Raises StorageCorruptionError if the stored data cannot be parsed.
            Raises StorageWriteError if the data store cannot be accessed.

        save(links: dict[str, str], **kwargs) -> LinkBaseDAO:
            Replace the whole stored mapping with `links`.
            Raises StorageWriteError on write failure.

    NOTE:
        - Writes always replace the full mapping. Implementations must never
          leave a partially written mapping behind.
    """

    @abstractmethod
    def load(self, **kwargs) -> dict[str, str]:
        """Read the whole mapping from the data store.

        Args:
            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            dict[str, str]: A fresh `short id -> long URL` dictionary.

        Raises:
            StorageCorruptionError:
                If the stored data cannot be parsed into a mapping.

            StorageWriteError:
                If the data store cannot be accessed.
        """
        pass

    @abstractmethod
    def save(self, links: dict[str, str], **kwargs) -> 'LinkBaseDAO':
        """Replace the whole stored mapping.

        Args:
            links (dict[str, str]):
                The complete mapping to persist.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            LinkBaseDAO: self (for method chaining)

        Raises:
            StorageWriteError:
                If there is an error writing to the data store.
        """
        pass
