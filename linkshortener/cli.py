"""Command line access to a LinkStore.

CLI usage:
    $ linkshortener add http://localhost:3000/page1
    $ linkshortener get k3x9q0
    $ linkshortener update k3x9q0 http://localhost:3000/page2
    $ linkshortener remove k3x9q0
    $ linkshortener list
    $ linkshortener --data-dir /var/lib/links --allowed-domain localhost:3000 add http://localhost:3000/x

Options are resolved like everywhere else (`load_config()`): YAML file from
--config or LINKSHORTENER_CONFIG, then environment variables, then the
command line flags given here.

Exit codes:
    0: success
    1: the short id doesn't exist
    2: invalid input (missing URL, domain mismatch) or bad configuration
    3: the links file couldn't be written
"""

import sys
import json
import argparse
from dataclasses import replace

from linkshortener.store import LinkStore
from linkshortener.exceptions import ValidationError, ConfigurationError
from linkshortener.dao.exceptions import StorageWriteError
from linkshortener.utils.config import load_config
from linkshortener.utils.logging import initialize_logging


EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID = 2
EXIT_STORAGE = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='linkshortener',
        description='Create, resolve and manage short links stored in a JSON file',
    )
    parser.add_argument('--config', default=None, help='Path to a YAML configuration file')
    parser.add_argument('--data-dir', default=None, help='Directory holding the links file (default: ./data)')
    parser.add_argument('--file-name', default=None, help='Name of the links file (default: links.json)')
    parser.add_argument(
        '--allowed-domain',
        default=None,
        help='Only accept URLs on this host[:port], e.g. localhost:3000 (default: accept any host)',
    )
    parser.add_argument('--log-level', default='WARNING', help='Log level for the JSON logs on stdout (default: WARNING)')

    commands = parser.add_subparsers(dest='command', required=True)

    add = commands.add_parser('add', help='Shorten a URL and print its short id')
    add.add_argument('url')

    get = commands.add_parser('get', help='Print the long URL of a short id')
    get.add_argument('short_id')

    remove = commands.add_parser('remove', help='Delete a short id')
    remove.add_argument('short_id')

    update = commands.add_parser('update', help='Point a short id at a new URL')
    update.add_argument('short_id')
    update.add_argument('url')

    commands.add_parser('list', help='Print all links as a JSON object')

    return parser


def run(args: argparse.Namespace, store: LinkStore) -> int:
    if args.command == 'add':
        print(store.add_link(args.url))
        return EXIT_OK

    if args.command == 'get':
        long_url = store.get_long_link(args.short_id)
        if long_url is None:
            print(f'No link found for shortId="{args.short_id}"', file=sys.stderr)
            return EXIT_NOT_FOUND
        print(long_url)
        return EXIT_OK

    if args.command == 'remove':
        if not store.remove_link(args.short_id):
            print(f'No link to remove. shortId="{args.short_id}" not found.', file=sys.stderr)
            return EXIT_NOT_FOUND
        print(f'Removed shortId="{args.short_id}"')
        return EXIT_OK

    if args.command == 'update':
        if not store.update_link(args.short_id, args.url):
            print(f'shortId="{args.short_id}" not found. Nothing updated.', file=sys.stderr)
            return EXIT_NOT_FOUND
        print(f'Updated shortId="{args.short_id}" => "{args.url}"')
        return EXIT_OK

    # list
    print(json.dumps(dict(store.list_all_links()), indent=2, ensure_ascii=False))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Steps:
        - Parse CLI arguments
        - Resolve the store configuration (YAML, environment, flags)
        - Run the requested store operation and print its result

    Returns:
        int: process exit code
    """
    args = build_parser().parse_args(argv)
    initialize_logging(args.log_level)

    try:
        store_config = load_config(args.config).store
    except ConfigurationError as e:
        print(f'Error: {e}', file=sys.stderr)
        return EXIT_INVALID

    overrides = {}
    if args.data_dir:
        overrides['data_dir'] = args.data_dir
    if args.file_name:
        overrides['file_name'] = args.file_name
    if args.allowed_domain:
        overrides['allowed_domain'] = args.allowed_domain
    store_config = replace(store_config, **overrides)

    try:
        store = LinkStore.from_config(store_config)
        return run(args, store)
    except ValidationError as e:
        print(f'Error: {e}', file=sys.stderr)
        return EXIT_INVALID
    except StorageWriteError as e:
        print(f'Error: {e}', file=sys.stderr)
        return EXIT_STORAGE


if __name__ == '__main__':
    sys.exit(main())
