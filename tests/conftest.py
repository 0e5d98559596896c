import pytest
from pathlib import Path

from uvws.config import loader


def create_project_structure(base_path: Path, files_to_create: dict):
    """
    Creates a directory structure with files. Keys ending in '/' are created
    as empty directories.
    files_to_create = {"dir/file.py": "content", "empty_dir/": None}
    """
    for rel_path, content in files_to_create.items():
        if rel_path.endswith("/"):
            (base_path / rel_path).mkdir(parents=True, exist_ok=True)
            continue
        file_path = base_path / rel_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content if content is not None else f"content of {rel_path}")


WORKSPACE_PYPROJECT = """\
[project]
name = "root"
version = "0.1.0"

[tool.uv.workspace]
members = ["packages/*"]
"""


@pytest.fixture
def uv_workspace(tmp_path: Path) -> Path:
    """
    Creates a workspace with two members and a stray file under packages/:
        ws/
            pyproject.toml            ([tool.uv.workspace], members = ["packages/*"])
            packages/
                foo/pyproject.toml
                bar/pyproject.toml
                readme.txt
    """
    root = tmp_path / "ws"
    create_project_structure(root, {
        "pyproject.toml": WORKSPACE_PYPROJECT,
        "packages/foo/pyproject.toml": '[project]\nname = "foo"\n',
        "packages/bar/pyproject.toml": '[project]\nname = "bar"\n',
        "packages/readme.txt": "not a member",
    })
    return root


@pytest.fixture(autouse=True)
def no_user_config(tmp_path_factory, monkeypatch):
    """Keeps a real ~/.config/uvws/config.toml out of every test."""
    missing = tmp_path_factory.mktemp("home") / "config.toml"
    monkeypatch.setattr(loader, "USER_CONFIG_FILE", missing)
