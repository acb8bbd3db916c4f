"""Tests for vendor preparation against a real temporary filesystem."""

import os
import shutil
from pathlib import Path

import pytest

from ffecho.core.config import EchoConfig
from ffecho.core.errors import MissingSourceError
from ffecho.core.vendor import (
    VendorSources,
    clean_vendor,
    prepare_vendor,
    vendored_package_dir,
)
from tests.fakes.user_feedback import FakeUserFeedback


def _make_framework(root: Path) -> VendorSources:
    (root / "bin").mkdir(parents=True)
    entry_point = root / "bin" / "functions-framework-ruby"
    entry_point.write_text("#!/usr/bin/env ruby\nputs 'hi'\n", encoding="utf-8")
    entry_point.chmod(0o755)
    (root / "lib" / "functions_framework").mkdir(parents=True)
    (root / "lib" / "functions_framework.rb").write_text("module FF; end\n", encoding="utf-8")
    (root / "lib" / "functions_framework" / "server.rb").write_text("# server\n", encoding="utf-8")
    (root / "functions_framework.gemspec").write_text("Gem::Specification\n", encoding="utf-8")
    return VendorSources(framework_root=root)


def _snapshot(directory: Path) -> dict[str, bytes]:
    return {
        str(path.relative_to(directory)): path.read_bytes()
        for path in sorted(directory.rglob("*"))
        if path.is_file()
    }


@pytest.fixture
def app_dir(tmp_path: Path) -> Path:
    app = tmp_path / "examples" / "echo"
    app.mkdir(parents=True)
    return app


def test_stage_copies_all_three_roots(tmp_path: Path, app_dir: Path) -> None:
    sources = _make_framework(tmp_path / "framework")
    feedback = FakeUserFeedback()

    prepare_vendor(True, app_dir, sources, feedback)

    package_dir = vendored_package_dir(app_dir, sources)
    assert package_dir == app_dir / "vendor" / "functions_framework"
    assert _snapshot(package_dir / "bin") == _snapshot(sources.framework_root / "bin")
    assert _snapshot(package_dir / "lib") == _snapshot(sources.framework_root / "lib")
    assert (package_dir / "functions_framework.gemspec").read_text() == "Gem::Specification\n"
    assert os.access(package_dir / "bin" / "functions-framework-ruby", os.X_OK)
    assert feedback.texts() == [
        "Vendoring the current framework source into vendor/functions_framework"
    ]


def test_stage_is_idempotent(tmp_path: Path, app_dir: Path) -> None:
    sources = _make_framework(tmp_path / "framework")

    prepare_vendor(True, app_dir, sources, FakeUserFeedback())
    first = _snapshot(app_dir / "vendor")
    prepare_vendor(True, app_dir, sources, FakeUserFeedback())
    second = _snapshot(app_dir / "vendor")

    assert first == second


def test_stage_replaces_stale_contents(tmp_path: Path, app_dir: Path) -> None:
    sources = _make_framework(tmp_path / "framework")
    stale = app_dir / "vendor" / "functions_framework" / "lib" / "old.rb"
    stale.parent.mkdir(parents=True)
    stale.write_text("stale", encoding="utf-8")

    prepare_vendor(True, app_dir, sources, FakeUserFeedback())

    assert not stale.exists()


def test_unstage_removes_vendor_dir(tmp_path: Path, app_dir: Path) -> None:
    sources = _make_framework(tmp_path / "framework")
    prepare_vendor(True, app_dir, sources, FakeUserFeedback())
    feedback = FakeUserFeedback()

    prepare_vendor(False, app_dir, sources, feedback)

    assert not (app_dir / "vendor").exists()
    assert feedback.texts() == ["Un-vendoring the framework and using the released package"]


def test_unstage_without_prior_state_is_noop(app_dir: Path) -> None:
    sources = VendorSources(framework_root=app_dir / "nowhere")

    prepare_vendor(False, app_dir, sources, FakeUserFeedback())

    assert not (app_dir / "vendor").exists()


def test_unstage_removes_a_stray_vendor_file(app_dir: Path) -> None:
    (app_dir / "vendor").write_text("not a directory", encoding="utf-8")

    prepare_vendor(False, app_dir, VendorSources(framework_root=app_dir), FakeUserFeedback())

    assert not (app_dir / "vendor").exists()


@pytest.mark.parametrize("missing", ["bin", "lib", "functions_framework.gemspec"])
def test_stage_with_missing_root_leaves_nothing(
    tmp_path: Path, app_dir: Path, missing: str
) -> None:
    sources = _make_framework(tmp_path / "framework")
    prepare_vendor(True, app_dir, sources, FakeUserFeedback())
    target = sources.framework_root / missing
    if target.is_dir():
        shutil.rmtree(target)
    else:
        target.unlink()

    with pytest.raises(MissingSourceError) as excinfo:
        prepare_vendor(True, app_dir, sources, FakeUserFeedback())

    assert excinfo.value.missing == [target]
    assert not (app_dir / "vendor").exists()
    assert [p.name for p in app_dir.iterdir()] == []


def test_missing_source_error_lists_every_missing_root(app_dir: Path) -> None:
    sources = VendorSources(framework_root=app_dir / "absent")

    with pytest.raises(MissingSourceError) as excinfo:
        prepare_vendor(True, app_dir, sources, FakeUserFeedback())

    assert excinfo.value.missing == list(sources.roots)
    assert isinstance(excinfo.value, FileNotFoundError)


def test_copy_failure_cleans_up_staging(
    tmp_path: Path, app_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    sources = _make_framework(tmp_path / "framework")

    def failing_copy(source: Path, destination: Path) -> None:
        raise OSError("disk full")

    monkeypatch.setattr("ffecho.core.vendor._copy_root", failing_copy)

    with pytest.raises(OSError, match="disk full"):
        prepare_vendor(True, app_dir, sources, FakeUserFeedback())

    assert list(app_dir.iterdir()) == []


def test_custom_vendor_dir_name(tmp_path: Path, app_dir: Path) -> None:
    sources = _make_framework(tmp_path / "framework")

    prepare_vendor(True, app_dir, sources, FakeUserFeedback(), vendor_dir_name="third_party")

    assert (app_dir / "third_party" / "functions_framework" / "bin").is_dir()
    assert not (app_dir / "vendor").exists()


def test_clean_vendor_reports_whether_anything_was_removed(app_dir: Path) -> None:
    assert clean_vendor(app_dir) is False

    (app_dir / "vendor" / "x").mkdir(parents=True)

    assert clean_vendor(app_dir) is True
    assert not (app_dir / "vendor").exists()


@pytest.mark.parametrize("stage", [True, False])
def test_leftover_staging_dirs_are_removed(tmp_path: Path, app_dir: Path, stage: bool) -> None:
    sources = _make_framework(tmp_path / "framework")
    leftover = app_dir / ".vendor-abc123" / "functions_framework" / "lib" / "old.rb"
    leftover.parent.mkdir(parents=True)
    leftover.write_text("half copied", encoding="utf-8")

    prepare_vendor(stage, app_dir, sources, FakeUserFeedback())

    assert not (app_dir / ".vendor-abc123").exists()
    assert [p.name for p in app_dir.iterdir()] == (["vendor"] if stage else [])


def test_clean_vendor_removes_leftover_staging_dir(app_dir: Path) -> None:
    (app_dir / ".vendor-stale").mkdir()
    (app_dir / ".vendored-notes").write_text("keep", encoding="utf-8")

    assert clean_vendor(app_dir) is True
    assert [p.name for p in app_dir.iterdir()] == [".vendored-notes"]


def test_nested_source_roots_keep_relative_paths(tmp_path: Path, app_dir: Path) -> None:
    root = tmp_path / "framework"
    (root / "tools" / "bin").mkdir(parents=True)
    (root / "tools" / "bin" / "functions-framework-ruby").write_text("#!ruby\n", encoding="utf-8")
    (root / "lib").mkdir()
    (root / "lib" / "functions_framework.rb").write_text("module FF; end\n", encoding="utf-8")
    (root / "functions_framework.gemspec").write_text("Gem::Specification\n", encoding="utf-8")
    config = EchoConfig(framework_root=root, entry_point_dir="tools/bin")

    prepare_vendor(True, app_dir, config.vendor_sources, FakeUserFeedback())

    assert (app_dir / config.server_binary(use_release=False)).is_file()
    assert not (app_dir / "vendor" / "functions_framework" / "bin").exists()
