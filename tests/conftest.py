"""Test configuration and fixtures for pytest."""

import sys
from pathlib import Path
from typing import Dict, List, Optional

import pytest
import yaml

# Make the package importable without installing it
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))


SAMPLE_NOTE = """Tags: #public #draft

# My Note: A Story
Tags: #public #draft

Body line one.
Body line two.
"""


@pytest.fixture
def notes_dir(tmp_path):
    """Create an empty notes directory with a sites/ folder."""
    path = tmp_path / "notes"
    (path / "sites").mkdir(parents=True)
    return path


@pytest.fixture
def site_dir(tmp_path):
    """Create an empty Hugo website root."""
    path = tmp_path / "site"
    path.mkdir()
    return path


@pytest.fixture
def sample_note():
    return SAMPLE_NOTE


@pytest.fixture
def write_note(notes_dir):
    """Helper fixture to create notes in the notes directory."""
    def _write_note(filename: str, content: str, newline: Optional[str] = None) -> Path:
        note_path = notes_dir / filename
        with open(note_path, "w", encoding="utf-8", newline=newline) as f:
            f.write(content)
        return note_path

    return _write_note


@pytest.fixture
def write_attachments(notes_dir):
    """Helper fixture to create a note's attachment bundle."""
    def _write_attachments(note_id: str, files: Dict[str, bytes]) -> Path:
        bundle = notes_dir / "files" / note_id
        bundle.mkdir(parents=True, exist_ok=True)
        for name, data in files.items():
            (bundle / name).write_bytes(data)
        return bundle

    return _write_attachments


@pytest.fixture
def write_config(notes_dir):
    """Helper fixture to write sites/<name>.yaml."""
    def _write_config(
        name: str = "blog",
        publish_tags: Optional[List[Dict[str, str]]] = None,
        pages: Optional[List[Dict[str, str]]] = None,
    ) -> Path:
        data = {
            "publish_tags": publish_tags if publish_tags is not None else [
                {"name": "public", "target": "posts"},
            ],
        }
        if pages is not None:
            data["pages"] = pages
        config_file = notes_dir / "sites" / f"{name}.yaml"
        config_file.write_text(yaml.safe_dump(data), encoding="utf-8")
        return config_file

    return _write_config


@pytest.fixture(autouse=True)
def console_logger():
    """Bind the exporter logger to the stdout of the running test."""
    from n2h.logger import setup_logger

    return setup_logger()
