"""Unit tests for the LinksFileDAO

Test coverage includes:

1. Initialization
   - Ensures the data directory and an empty links file are created when missing.
   - Ensures an existing links file is never touched, even if corrupt.
   - Confirms an unusable data directory raises StorageWriteError.

2. Loading behavior
   - Ensures a valid file loads into a fresh dictionary.
   - Confirms invalid JSON, non-object JSON and non-string URLs raise StorageCorruptionError.
   - Confirms a vanished file raises StorageWriteError.

3. Saving behavior
   - Ensures the full mapping is written as pretty-printed JSON.
   - Ensures no temporary files are left behind.
   - Ensures invalid types raise a Beartype error.
   - Confirms OS errors raise StorageWriteError and keep the previous file intact.
"""

import os
import json
import errno

import pytest
from beartype.roar import BeartypeCallHintParamViolation

from linkshortener.dao.file import LinksFileDAO
from linkshortener.dao.exceptions import StorageCorruptionError, StorageWriteError


# -------------------------------
# 1. Initialization
# -------------------------------


def test_init_creates_directory_and_empty_file(data_dir, links_file):
    """Ensure a missing data directory and links file are created with '{}'."""
    assert not data_dir.exists()

    dao = LinksFileDAO(data_dir=data_dir, file_name='links.json')

    assert dao.path == links_file
    assert links_file.read_text(encoding='utf-8') == '{}'
    assert dao.load() == {}


def test_init_keeps_existing_file(write_links_file, data_dir, links_file):
    """Ensure an existing (even corrupt) links file is left untouched."""
    write_links_file('{not json')

    LinksFileDAO(data_dir=data_dir, file_name='links.json')

    assert links_file.read_text(encoding='utf-8') == '{not json'


def test_init_with_unusable_data_dir(tmp_path):
    """Ensure a data directory path occupied by a file raises StorageWriteError."""
    blocker = tmp_path / 'data'
    blocker.write_text('i am a file', encoding='utf-8')

    with pytest.raises(StorageWriteError, match="Can't access links file"):
        LinksFileDAO(data_dir=blocker, file_name='links.json')


def test_repr(data_dir):
    assert repr(LinksFileDAO(data_dir=data_dir)) == '<LinksFileDAO>'


# -------------------------------
# 2. Loading behavior
# -------------------------------


def test_load_links(write_links_file, data_dir):
    """Ensure a valid links file loads into a dictionary."""
    write_links_file({'k3x9q0': 'http://localhost:3000/page1', 'a1b2c3': 'https://example.com/'})
    dao = LinksFileDAO(data_dir=data_dir)

    assert dao.load() == {'k3x9q0': 'http://localhost:3000/page1', 'a1b2c3': 'https://example.com/'}


def test_load_returns_fresh_dictionary(write_links_file, data_dir):
    """Ensure mutating a loaded mapping doesn't affect later loads."""
    write_links_file({'k3x9q0': 'http://localhost:3000/page1'})
    dao = LinksFileDAO(data_dir=data_dir)

    dao.load()['zzzzzz'] = 'http://localhost:3000/evil'

    assert dao.load() == {'k3x9q0': 'http://localhost:3000/page1'}


@pytest.mark.parametrize(
    'content, message',
    [
        ('{not json', 'not valid JSON'),
        ('', 'not valid JSON'),
        ('["k3x9q0", "http://localhost:3000/page1"]', 'must hold a JSON object'),
        ('"just a string"', 'must hold a JSON object'),
        ('{"k3x9q0": 42}', 'non-string URLs for: k3x9q0'),
        ('{"k3x9q0": null}', 'non-string URLs for: k3x9q0'),
    ],
)
def test_load_corrupt_file(write_links_file, data_dir, content, message):
    """Ensure unparsable content raises StorageCorruptionError."""
    write_links_file(content)
    dao = LinksFileDAO(data_dir=data_dir)

    with pytest.raises(StorageCorruptionError, match=message):
        dao.load()


def test_load_undecodable_file(data_dir, links_file):
    """Ensure bytes that aren't UTF-8 are reported as corruption, not as an access error."""
    data_dir.mkdir(parents=True)
    links_file.write_bytes(b'\xff\xfe{}')
    dao = LinksFileDAO(data_dir=data_dir)

    with pytest.raises(StorageCorruptionError, match='not valid utf-8 text'):
        dao.load()


def test_load_vanished_file(data_dir, links_file):
    """Ensure a links file deleted behind the DAO's back raises StorageWriteError."""
    dao = LinksFileDAO(data_dir=data_dir)
    links_file.unlink()

    with pytest.raises(StorageWriteError):
        dao.load()


# -------------------------------
# 3. Saving behavior
# -------------------------------


def test_save_links(data_dir, links_file):
    """Ensure the full mapping is written as 2-space indented JSON."""
    dao = LinksFileDAO(data_dir=data_dir)
    links = {'k3x9q0': 'http://localhost:3000/page1', 'a1b2c3': 'https://example.com/ünïcode'}

    result = dao.save(links)

    assert result is dao
    assert links_file.read_text(encoding='utf-8') == json.dumps(links, indent=2, ensure_ascii=False)
    assert dao.load() == links


def test_save_replaces_previous_content(write_links_file, data_dir):
    """Ensure save() replaces the file instead of merging into it."""
    write_links_file({'old111': 'http://localhost:3000/old'})
    dao = LinksFileDAO(data_dir=data_dir)

    dao.save({'new222': 'http://localhost:3000/new'})

    assert dao.load() == {'new222': 'http://localhost:3000/new'}


def test_save_leaves_no_temporary_files(data_dir):
    dao = LinksFileDAO(data_dir=data_dir)
    dao.save({'k3x9q0': 'http://localhost:3000/page1'})
    dao.save({})

    assert sorted(p.name for p in data_dir.iterdir()) == ['links.json']


def test_save_with_invalid_type(data_dir):
    """Ensure saving something other than a dict raises a Beartype error."""
    dao = LinksFileDAO(data_dir=data_dir)

    with pytest.raises(BeartypeCallHintParamViolation):
        dao.save(['k3x9q0', 'http://localhost:3000/page1'])


def test_save_with_os_error(write_links_file, data_dir, links_file, monkeypatch):
    """Ensure a failing write raises StorageWriteError and keeps the old file."""
    write_links_file({'k3x9q0': 'http://localhost:3000/page1'})
    dao = LinksFileDAO(data_dir=data_dir)

    def _disk_full(*args, **kwargs):
        raise OSError(errno.ENOSPC, 'No space left on device')

    monkeypatch.setattr(os, 'replace', _disk_full)

    with pytest.raises(StorageWriteError, match='No space left on device'):
        dao.save({'k3x9q0': 'http://localhost:3000/page1', 'a1b2c3': 'https://example.com/'})

    monkeypatch.undo()
    assert json.loads(links_file.read_text(encoding='utf-8')) == {'k3x9q0': 'http://localhost:3000/page1'}
    assert sorted(p.name for p in data_dir.iterdir()) == ['links.json']
