"""
Tests for cppstarter.emitter.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cppstarter.emitter import artifacts, emit_artifacts, write_text
from cppstarter.errors import LicenseFetchError, ScaffoldError
from cppstarter.project_spec import Environment, ProjectSpec
from cppstarter.scaffold import build_tree

ENV = Environment(identity_name="Jane Doe", year=2026)


def _spec(**kwargs) -> ProjectSpec:
    return ProjectSpec(name="demo", repo_url="https://github.com/JaneDoe/demo", **kwargs)


def _no_fetch(url):
    raise AssertionError("unexpected download")


@pytest.fixture
def root(tmp_path: Path) -> Path:
    root = tmp_path / "demo"
    build_tree(root, _spec())
    return root


def test_artifact_order_starts_with_root_cmake():
    paths = [rel for rel, _ in artifacts(_spec())]
    assert paths[0] == "CMakeLists.txt"
    assert paths[1] == "demo/CMakeLists.txt"
    assert paths[-1] == "README.md"
    assert "LICENSE" not in paths


def test_emit_writes_every_file(root: Path):
    written = emit_artifacts(root, _spec(), ENV, fetch=_no_fetch)

    expected = [rel for rel, _ in artifacts(_spec())] + ["LICENSE"]
    assert [p.relative_to(root).as_posix() for p in written] == expected
    for path in written:
        assert path.is_file()

    assert "set(CMAKE_CXX_STANDARD 20)" in (root / "CMakeLists.txt").read_text()
    assert "add_library(demo STATIC" in (root / "demo/CMakeLists.txt").read_text()
    license_text = (root / "LICENSE").read_text()
    assert license_text.startswith("MIT License")
    assert "2026 Jane Doe" in license_text


def test_emit_apache_uses_fetcher(root: Path):
    urls = []

    def fetch(url):
        urls.append(url)
        return "Copyright [yyyy] [name of copyright owner]\n"

    emit_artifacts(root, _spec(license_type="Apache-2.0"), ENV, fetch=fetch)
    assert len(urls) == 1
    assert (root / "LICENSE").read_text() == "Copyright 2026 Jane Doe\n"


def test_emit_unknown_license_writes_no_license(root: Path, capsys):
    written = emit_artifacts(root, _spec(license_type="WTFPL"), ENV, fetch=_no_fetch)
    assert not (root / "LICENSE").exists()
    assert len(written) == len(artifacts(_spec()))
    assert "Unknown license 'WTFPL'" in capsys.readouterr().out


def test_write_failure_aborts_sequence(root: Path):
    # A directory where README.md should go makes that write fail
    (root / "README.md").mkdir()
    with pytest.raises(ScaffoldError):
        emit_artifacts(root, _spec(), ENV, fetch=_no_fetch)

    # earlier files remain, later ones were never attempted
    assert (root / ".gitignore").is_file()
    assert not (root / "LICENSE").exists()


def test_license_download_failure_is_fatal(root: Path):
    def fetch(url):
        raise LicenseFetchError("offline")

    with pytest.raises(ScaffoldError):
        emit_artifacts(root, _spec(license_type="Apache-2.0"), ENV, fetch=fetch)
    assert (root / "README.md").is_file()
    assert not (root / "LICENSE").exists()


def test_write_text_into_missing_directory(tmp_path: Path):
    with pytest.raises(ScaffoldError, match="Failed to write"):
        write_text(tmp_path / "nope" / "file.txt", "x")
