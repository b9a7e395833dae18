"""Link storage engine

LinkStore is the sole authority over the `short id -> long URL` mapping and the
sole writer of its durable mirror (a JSON file managed by LinksFileDAO).

Responsibilities:
    - Generate random, collision-free short ids;
    - Enforce the optional allowed-domain constraint before any insert or update;
    - Write the full mapping through to disk on every mutation;
    - Keep memory and disk consistent when a write fails.

Every mutation builds the new mapping as a copy, saves it, and only then swaps
it in. A failed save therefore leaves the in-memory mapping untouched.

Classes:
    LinkStore:
        Thread-safe, write-through link mapping.

Example:
    >>> from linkshortener.store import LinkStore
    >>> store = LinkStore(data_dir='./data', file_name='links.json')
    >>> short_id = store.add_link('http://localhost:3000/page1')
    >>> store.get_long_link(short_id)
    'http://localhost:3000/page1'
    >>> store.remove_link(short_id)
    True
    >>> dict(store.list_all_links())
    {}
"""

import logging
import threading
from pathlib import Path
from types import MappingProxyType
from collections.abc import Mapping

from beartype import beartype

from linkshortener.types import LinksMapping
from linkshortener.models import LinkEntryModel
from linkshortener.dao.base import LinkBaseDAO
from linkshortener.dao.file import LinksFileDAO
from linkshortener.dao.exceptions import StorageCorruptionError
from linkshortener.utils.config import StoreConfig
from linkshortener.utils.shortener import generate_unique_short_id
from linkshortener.utils.validators import require_long_url, validate_domain
from linkshortener.utils.constants import DEFAULT_DATA_DIR, DEFAULT_FILE_NAME, DEFAULT_SHORT_ID_LENGTH


logger = logging.getLogger(__name__)


class LinkStore:
    """Write-through mapping of short ids to long URLs

    Attributes:
        allowed_domain (str | None):
            When set, every accepted long URL must have exactly this host[:port].
        short_id_length (int):
            Length of newly generated short ids.
        dao (LinkBaseDAO):
            Durable mirror of the mapping.

    Methods:
        add_link(long_url: str) -> str
        get_long_link(short_id: str) -> str | None
        get_entry(short_id: str) -> LinkEntryModel | None
        remove_link(short_id: str) -> bool
        update_link(short_id: str, new_long_url: str) -> bool
        list_all_links() -> Mapping[str, str]

    NOTE:
        All operations run under one re-entrant lock. Mutations hold it across
        both the in-memory change and the file rewrite, so readers always see
        either the state before or after a mutation.
    """

    def __init__(
        self,
        data_dir: str | Path = DEFAULT_DATA_DIR,
        file_name: str = DEFAULT_FILE_NAME,
        allowed_domain: str | None = None,
        short_id_length: int = DEFAULT_SHORT_ID_LENGTH,
        dao: LinkBaseDAO | None = None,
    ):
        """Initialize the store and load the mapping from disk

        Creates the data directory and an empty links file when missing. A links
        file that can't be parsed is logged and replaced by an empty mapping in
        memory; the file itself is left alone until the next mutation.

        Args:
            data_dir (str | Path):
                Directory holding the links file. Defaults to './data'.
            file_name (str):
                Name of the links file. Defaults to 'links.json'.
            allowed_domain (str | None):
                Only accept URLs on this host[:port]. None disables the check.
            short_id_length (int):
                Length of generated short ids. Defaults to 6.
            dao (LinkBaseDAO | None):
                Pre-initialized DAO. If None, a LinksFileDAO is created.

        Raises:
            StorageWriteError:
                If the links file can't be created or read.
        """
        if dao is None:
            dao = LinksFileDAO(data_dir=data_dir, file_name=file_name)

        self.dao = dao
        self.allowed_domain = allowed_domain
        self.short_id_length = short_id_length

        self._lock = threading.RLock()
        self._links: LinksMapping = self._load()

    @classmethod
    def from_config(cls, config: StoreConfig, **kwargs) -> 'LinkStore':
        """Build a store from a StoreConfig

        Example:
            >>> store = LinkStore.from_config(load_config().store)
        """
        return cls(
            data_dir=config.data_dir,
            file_name=config.file_name,
            allowed_domain=config.allowed_domain,
            short_id_length=config.short_id_length,
            **kwargs,
        )

    def _load(self) -> LinksMapping:
        try:
            links = self.dao.load()
        except StorageCorruptionError:
            logger.warning('Links file is corrupt. Starting with an empty mapping.', exc_info=True, extra={'dao': repr(self.dao)})
            return {}

        logger.info('Loaded links.', extra={'links': len(links)})
        return links

    def _commit(self, links: LinksMapping) -> None:
        # Disk first: on StorageWriteError the current mapping stays in place
        self.dao.save(links)
        self._links = links

    def _check(self, long_url: str | None) -> str:
        long_url = require_long_url(long_url)
        return validate_domain(long_url, self.allowed_domain)

    def add_link(self, long_url: str | None) -> str:
        """Store a long URL under a new random short id

        Args:
            long_url (str):
                Absolute URL to shorten.

        Returns:
            str: The newly generated short id.

        Raises:
            ValidationError:
                If `long_url` is missing or empty.
            DomainMismatchError:
                If an allowed domain is configured and the URL is malformed or on another host.
            StorageWriteError:
                If the links file can't be written. Nothing is stored in that case.

        Example:
            >>> store.add_link('http://localhost:3000/page1')
            'k3x9q0'
        """
        long_url = self._check(long_url)

        with self._lock:
            short_id = generate_unique_short_id(self._links, length=self.short_id_length)
            links = dict(self._links)
            links[short_id] = long_url
            self._commit(links)

        logger.info('Link added.', extra={'shortId': short_id})
        return short_id

    @beartype
    def get_long_link(self, short_id: str) -> str | None:
        """Return the long URL for a short id, or None if it's unknown"""
        with self._lock:
            return self._links.get(short_id)

    @beartype
    def get_entry(self, short_id: str) -> LinkEntryModel | None:
        long_url = self.get_long_link(short_id)
        return None if long_url is None else LinkEntryModel(short_id=short_id, long_url=long_url)

    @beartype
    def remove_link(self, short_id: str) -> bool:
        """Delete a short id

        Returns:
            bool: True if the link existed and was removed, False otherwise.

        Raises:
            StorageWriteError:
                If the links file can't be written. The link is kept in that case.
        """
        with self._lock:
            if short_id not in self._links:
                return False

            links = dict(self._links)
            del links[short_id]
            self._commit(links)

        logger.info('Link removed.', extra={'shortId': short_id})
        return True

    @beartype
    def update_link(self, short_id: str, new_long_url: str | None) -> bool:
        """Point an existing short id at a new long URL

        Returns:
            bool: True if the link existed and was updated, False otherwise.

        Raises:
            ValidationError:
                If `new_long_url` is missing or empty.
            DomainMismatchError:
                If an allowed domain is configured and the URL is malformed or on another host.
            StorageWriteError:
                If the links file can't be written.

        In every error case the stored URL is left unchanged.
        """
        with self._lock:
            if short_id not in self._links:
                return False

            new_long_url = self._check(new_long_url)
            links = dict(self._links)
            links[short_id] = new_long_url
            self._commit(links)

        logger.info('Link updated.', extra={'shortId': short_id})
        return True

    def list_all_links(self) -> Mapping[str, str]:
        """Return a read-only snapshot of all links

        The snapshot is detached from the store: later mutations don't show up
        in it and it can't be used to mutate the store.

        Example:
            >>> dict(store.list_all_links())
            {'k3x9q0': 'http://localhost:3000/page1'}
        """
        with self._lock:
            return MappingProxyType(dict(self._links))

    def __len__(self) -> int:
        with self._lock:
            return len(self._links)

    def __contains__(self, short_id: object) -> bool:
        with self._lock:
            return short_id in self._links
