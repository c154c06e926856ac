"""Checks on pyproject metadata."""

from pathlib import Path

import pytest

from logdeck import cli

tomllib = pytest.importorskip("tomllib")

_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(scope="module")
def project():
    with open(_ROOT / "pyproject.toml", "rb") as f:
        return tomllib.load(f)["project"]


def test_readme_is_a_real_readme(project):
    readme = project.get("readme")
    if readme is not None:
        assert Path(readme).name.lower().startswith("readme")
        assert (_ROOT / readme).is_file()


def test_console_script_targets_cli_main(project):
    assert project["scripts"]["logdeck"] == "logdeck.cli:main"
    assert callable(cli.main)


def test_runtime_dependencies(project):
    names = {dep.split(">")[0].split("=")[0] for dep in project["dependencies"]}
    assert names == {"rich", "textual"}
