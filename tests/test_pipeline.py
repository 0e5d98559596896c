import os
from pathlib import Path

from uvws.config.settings import ResolveConfig
from uvws.core.pipeline import get_workspace_extra_paths, resolve_workspace
from conftest import create_project_structure


def test_member_sees_its_sibling(uv_workspace: Path):
    bar = uv_workspace / "packages" / "bar"
    foo = uv_workspace / "packages" / "foo"

    assert get_workspace_extra_paths(bar) == [os.path.join("..", "foo")]
    assert get_workspace_extra_paths(foo) == [os.path.join("..", "bar")]

def test_string_member_root_with_trailing_slash(uv_workspace: Path):
    assert get_workspace_extra_paths(f"{uv_workspace}/packages/bar/") == [os.path.join("..", "foo")]

def test_outside_any_workspace(tmp_path: Path):
    create_project_structure(tmp_path, {"solo/pyproject.toml": '[project]\nname = "solo"\n'})
    assert get_workspace_extra_paths(tmp_path / "solo") == []

def test_workspace_without_members(tmp_path: Path):
    create_project_structure(tmp_path, {
        "pyproject.toml": "[tool.uv.workspace]\n",
        "packages/a/": None,
    })

    resolution = resolve_workspace(tmp_path / "packages" / "a")

    assert resolution.found
    assert resolution.member_patterns == []
    assert resolution.extra_paths == []

def test_malformed_members_array_degrades_to_empty(tmp_path: Path):
    create_project_structure(tmp_path, {
        "pyproject.toml": "[tool.uv.workspace]\nmembers = packages/*\n",
        "packages/a/": None,
    })
    assert get_workspace_extra_paths(tmp_path / "packages" / "a") == []

def test_member_root_at_workspace_root(uv_workspace: Path):
    extra = get_workspace_extra_paths(uv_workspace)
    assert sorted(extra) == sorted([os.path.join("packages", "foo"), os.path.join("packages", "bar")])

def test_root_listed_as_member_is_reachable_from_members(tmp_path: Path):
    create_project_structure(tmp_path, {
        "pyproject.toml": '[tool.uv.workspace]\nmembers = [".", "libs/*"]\n',
        "libs/core/": None,
    })

    assert get_workspace_extra_paths(tmp_path / "libs" / "core") == [os.path.join("..", "..")]
    assert get_workspace_extra_paths(tmp_path) == [os.path.join("libs", "core")]

def test_nested_start_inside_member(uv_workspace: Path):
    # a start path below a member is not itself a member, so its own member is listed as "..".
    src = uv_workspace / "packages" / "bar" / "src"
    src.mkdir()

    extra = get_workspace_extra_paths(src)

    assert sorted(extra) == sorted([os.path.join("..", "..", "foo"), ".."])

def test_resolution_report(uv_workspace: Path):
    bar = uv_workspace / "packages" / "bar"

    resolution = resolve_workspace(bar)

    assert resolution.member_root == bar
    assert resolution.workspace_root == uv_workspace
    assert resolution.member_patterns == ["packages/*"]
    assert set(resolution.members) == {bar, uv_workspace / "packages" / "foo"}
    assert resolution.extra_paths == [os.path.join("..", "foo")]

def test_order_follows_resolved_members(tmp_path: Path):
    create_project_structure(tmp_path, {
        "pyproject.toml": '[tool.uv.workspace]\nmembers = ["libs/z", "apps/a", "libs/m"]\n',
        "libs/z/": None,
        "apps/a/": None,
        "libs/m/": None,
    })

    extra = get_workspace_extra_paths(tmp_path / "libs" / "m")

    assert extra == [os.path.join("..", "z"), os.path.join("..", "..", "apps", "a")]

def test_workspace_excludes_only_apply_on_request(tmp_path: Path):
    create_project_structure(tmp_path, {
        "pyproject.toml": '[tool.uv.workspace]\nmembers = ["packages/*"]\nexclude = ["packages/legacy"]\n',
        "packages/app/": None,
        "packages/legacy/": None,
    })
    app = tmp_path / "packages" / "app"

    assert get_workspace_extra_paths(app) == [os.path.join("..", "legacy")]
    assert get_workspace_extra_paths(app, ResolveConfig(member_root=app, apply_excludes=True)) == []

def test_absolute_paths_option(uv_workspace: Path):
    bar = uv_workspace / "packages" / "bar"
    config = ResolveConfig(member_root=bar, absolute_paths=True)

    assert get_workspace_extra_paths(bar, config) == [str(uv_workspace / "packages" / "foo")]

def test_custom_conventions(tmp_path: Path):
    create_project_structure(tmp_path, {
        "workspace.toml": "[workspace]\nmembers = ['crates/*']\n",
        "crates/a/": None,
        "crates/b/": None,
    })
    a = tmp_path / "crates" / "a"
    config = ResolveConfig(member_root=a, config_filename="workspace.toml", marker="[workspace]")

    assert get_workspace_extra_paths(a, config) == [os.path.join("..", "b")]
    assert get_workspace_extra_paths(a) == []

def test_repeated_calls_are_identical(uv_workspace: Path):
    bar = uv_workspace / "packages" / "bar"
    assert get_workspace_extra_paths(bar) == get_workspace_extra_paths(bar)
