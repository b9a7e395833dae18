"""File mixin providing shared path setup and storage initialization.

Responsibilities:
    - Resolve the links file path from a data directory and file name
    - Create the data directory and an empty links file when missing

Classes:
    - FileStorageMixin: Base mixin to inject path management & storage setup.

Example:
    Typical usage with a DAO implementation:

        >>> class LinksFileDAO(FileStorageMixin, LinkBaseDAO):
        ...     pass
        ...
        >>> dao = LinksFileDAO(data_dir='./data', file_name='links.json')
        >>> dao.path
        PosixPath('data/links.json')
"""

import logging
from pathlib import Path

from linkshortener.dao.file.helpers import handle_storage_error
from linkshortener.utils.constants import DEFAULT_DATA_DIR, DEFAULT_FILE_NAME


logger = logging.getLogger(__name__)

EMPTY_MAPPING = '{}'


class FileStorageMixin:
    """Mixin for file path setup and storage initialization for file-backed DAOs.

    Attributes:
        path (Path):
            Location of the links file used by subclasses.

        encoding (str):
            Text encoding of the links file.

    Methods:
        _ensure_storage() -> bool:
            Create the data directory and an empty links file if they don't exist.
            Returns True if the file had to be created.
    """

    def __init__(
        self,
        data_dir: str | Path = DEFAULT_DATA_DIR,
        file_name: str = DEFAULT_FILE_NAME,
        encoding: str = 'utf-8',
    ):
        """Initialize a file-based DAO

        Args:
            data_dir (str | Path):
                Directory holding the links file. Defaults to './data'.

            file_name (str):
                Name of the links file. Defaults to 'links.json'.

            encoding (str):
                Text encoding of the links file. Defaults to 'utf-8'.

        Raises:
            StorageWriteError:
                If the directory or the file cannot be created.
        """
        self.path = Path(data_dir) / file_name
        self.encoding = encoding

        self._ensure_storage()

    @handle_storage_error
    def _ensure_storage(self) -> bool:
        """Create the data directory and an empty links file when missing

        An existing file is never touched, even if its content is invalid.

        Returns:
            bool:
                True if an empty links file was created, False if one already existed.

        Raises:
            StorageWriteError:
                If the directory or the file cannot be created.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if self.path.exists():
            return False

        self.path.write_text(EMPTY_MAPPING, encoding=self.encoding)
        logger.info('Created empty links file.', extra={'path': str(self.path)})
        return True

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'
