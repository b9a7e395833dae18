"""Data Access Object (DAO) implementation for the JSON links file

This module provides a file-based implementation of LinkBaseDAO which mirrors
the whole `short id -> long URL` mapping to a single pretty-printed JSON object:

    {
      "k3x9q0": "http://localhost:3000/page1",
      "a1b2c3": "https://example.com/blog/article-123"
    }

Responsibilities:
    - Load and validate the mapping from disk;
    - Replace the file atomically on every save (temporary file + rename);
    - Translate file system failures into DAO exceptions.

Classes:
    LinksFileDAO:
        DAO for loading and saving the link mapping in a JSON file.

Example:
    >>> from linkshortener.dao.file import LinksFileDAO
    >>> dao = LinksFileDAO(data_dir='./data', file_name='links.json')
    >>> dao.save({'k3x9q0': 'http://localhost:3000/page1'})
    <LinksFileDAO>
    >>> dao.load()
    {'k3x9q0': 'http://localhost:3000/page1'}
"""

import os
import json
import logging
import tempfile

from beartype import beartype

from linkshortener.dao.base import LinkBaseDAO
from linkshortener.dao.file.mixins import FileStorageMixin
from linkshortener.dao.file.helpers import handle_storage_error
from linkshortener.dao.exceptions import StorageCorruptionError


logger = logging.getLogger(__name__)


class LinksFileDAO(FileStorageMixin, LinkBaseDAO):
    """JSON file-based Data Access Object (DAO) for the link mapping

    Attributes (see FileStorageMixin):
        path (Path):
            Location of the links file.
        encoding (str):
            Text encoding of the links file.

    Methods:
        load(**kwargs) -> dict[str, str]:
            Read and validate the mapping.
            Raises StorageCorruptionError when the file is not a JSON object of strings.
            Raises StorageWriteError when the file cannot be read.

        save(links: dict[str, str], **kwargs) -> LinksFileDAO:
            Atomically replace the file with `links`.
            Raises StorageWriteError when the file cannot be written.
    """

    @handle_storage_error
    def load(self, **kwargs) -> dict[str, str]:
        """Read the link mapping from the JSON file

        Returns:
            dict[str, str]:
                A fresh dictionary, safe for the caller to mutate.

        Raises:
            StorageCorruptionError:
                If the file is not valid JSON, or not an object mapping strings to strings.
            StorageWriteError:
                If the file cannot be read.

        Example:
            >>> dao.load()
            {'k3x9q0': 'http://localhost:3000/page1'}
        """
        try:
            content = self.path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise StorageCorruptionError(f'Links file at {self.path} is not valid {self.encoding} text.') from e

        try:
            links = json.loads(content)
        except json.JSONDecodeError as e:
            raise StorageCorruptionError(f'Links file at {self.path} is not valid JSON: {e.msg} (line {e.lineno}).') from e

        if not isinstance(links, dict):
            raise StorageCorruptionError(f'Links file at {self.path} must hold a JSON object (got {type(links).__name__}).')

        bad_keys = [key for key, value in links.items() if not isinstance(value, str)]
        if bad_keys:
            raise StorageCorruptionError(f'Links file at {self.path} holds non-string URLs for: {", ".join(bad_keys)}.')

        return links

    @handle_storage_error
    @beartype
    def save(self, links: dict[str, str], **kwargs) -> 'LinksFileDAO':
        """Atomically replace the JSON file with the given mapping

        The JSON is written to a temporary file in the same directory, flushed
        to disk and then renamed over the links file, so readers and crashes
        only ever observe either the old or the new mapping.

        Args:
            links (dict[str, str]):
                The complete mapping to persist.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            LinksFileDAO: self (for method chaining)

        Raises:
            StorageWriteError:
                If the file cannot be written (disk full, permissions, etc.).

        Example:
            >>> dao.save({'k3x9q0': 'http://localhost:3000/page1'})
            <LinksFileDAO>
        """
        payload = json.dumps(links, indent=2, ensure_ascii=False)

        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f'.{self.path.name}.', suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding=self.encoding) as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except BaseException:
            # Never leave temporary files behind on failure
            try:
                os.unlink(tmp_path)
            except FileNotFoundError:
                pass
            raise

        logger.debug('Saved links file.', extra={'path': str(self.path), 'links': len(links)})
        return self
