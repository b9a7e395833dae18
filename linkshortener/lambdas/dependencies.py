"""Resolve the configuration and LinkStore a handler invocation works with

Tests (and long-lived hosts) pass a ready store. Otherwise the store for the
resolved `StoreConfig` is built once and reused by every later invocation in
the process, so one LinkStore (and one lock) owns each links file.
"""

import functools

from linkshortener.store import LinkStore
from linkshortener.utils.config import AppConfig, StoreConfig, load_config


@functools.cache
def store_for(config: StoreConfig) -> LinkStore:
    return LinkStore.from_config(config)


def resolve(store: LinkStore | None = None, config: AppConfig | None = None) -> tuple[LinkStore, AppConfig]:
    if config is None:
        config = load_config()
    if store is None:
        store = store_for(config.store)
    return store, config
