"""Checks on the distribution metadata in ``pyproject.toml``."""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


@pytest.fixture(scope="module")
def pyproject() -> dict:
    with PYPROJECT.open("rb") as fh:
        return tomllib.load(fh)


class TestDistribution:
    def test_only_the_src_package_is_installed(self, pyproject):
        setuptools_cfg = pyproject["tool"]["setuptools"]
        assert "py-modules" not in setuptools_cfg
        assert setuptools_cfg["packages"]["find"]["include"] == ["src*"]

    def test_no_readme_declared(self, pyproject):
        assert "readme" not in pyproject["project"]

    def test_runtime_stack(self, pyproject):
        deps = pyproject["project"]["dependencies"]
        names = {dep.split(">")[0].split("[")[0] for dep in deps}
        assert names == {
            "fastapi", "uvicorn", "pydantic", "pydantic-settings", "slowapi",
        }
