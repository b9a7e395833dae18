import json
from pathlib import Path

import pytest


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Provide a not-yet-existing data directory under pytest's tmp_path."""
    return tmp_path / 'data'


@pytest.fixture
def links_file(data_dir: Path) -> Path:
    return data_dir / 'links.json'


@pytest.fixture
def write_links_file(data_dir: Path, links_file: Path):
    """Write raw content (or a JSON-serializable object) to the links file."""

    def _write(content) -> Path:
        data_dir.mkdir(parents=True, exist_ok=True)
        text = content if isinstance(content, str) else json.dumps(content)
        links_file.write_text(text, encoding='utf-8')
        return links_file

    return _write
