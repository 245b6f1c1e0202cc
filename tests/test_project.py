import json
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from rustlings.project import Crate, RustAnalyzerProject


def _completed(stdout=b""):
    return subprocess.CompletedProcess(args=[], returncode=0, stdout=stdout, stderr=b"")


def test_new_project_is_empty():
    project = RustAnalyzerProject()
    assert project.sysroot_src == ""
    assert project.crates == []


def test_add_path_only_accepts_rust_files():
    project = RustAnalyzerProject()
    project.add_path("exercises/intro/intro1.rs")
    project.add_path("exercises/intro/README.md")
    project.add_path("exercises/intro")
    assert [c.root_module for c in project.crates] == [str(Path("exercises/intro/intro1.rs"))]
    crate = project.crates[0]
    assert crate.edition == "2021"
    assert crate.deps == []
    assert crate.cfg == ["test"]


def test_to_json_structure():
    project = RustAnalyzerProject(sysroot_src="/toolchain/src")
    project.add_path("a.rs")
    data = json.loads(project.to_json())
    assert data == {
        "sysroot_src": "/toolchain/src",
        "crates": [{"root_module": "a.rs", "edition": "2021", "deps": [], "cfg": ["test"]}],
    }
    assert list(data) == ["sysroot_src", "crates"]
    assert " " not in project.to_json().replace("/toolchain/src", "")


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/src", crates=[Crate("x.rs")])
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    assert target.read_text(encoding="utf-8") == project.to_json()
    loaded = json.loads(target.read_text(encoding="utf-8"))
    assert RustAnalyzerProject(
        loaded["sysroot_src"], [Crate(**c) for c in loaded["crates"]]
    ) == project


def test_exercises_to_json(tmp_path):
    root = tmp_path / "exercises"
    (root / "intro").mkdir(parents=True)
    (root / "intro" / "intro1.rs").write_text("fn main() {}")
    (root / "intro" / "README.md").write_text("readme")
    (root / "quiz1.rs").write_text("fn main() {}")
    project = RustAnalyzerProject()
    project.exercises_to_json(root)
    modules = [c.root_module for c in project.crates]
    assert sorted(modules) == sorted([str(root / "intro" / "intro1.rs"), str(root / "quiz1.rs")])
    assert all(m.endswith(".rs") for m in modules)


def test_exercises_to_json_missing_folder(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path / "nowhere")
    assert project.crates == []


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/custom/rust/library")
    project = RustAnalyzerProject()
    with patch("subprocess.run") as run:
        result = project.get_sysroot_src()
    assert result == "/custom/rust/library"
    assert project.sysroot_src == "/custom/rust/library"
    assert run.call_count == 0


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    project = RustAnalyzerProject()
    with patch("subprocess.run", return_value=_completed(b"/opt/toolchain\n")) as run:
        project.get_sysroot_src()
    assert run.call_args[0][0] == ["rustc", "--print", "sysroot"]
    assert Path(project.sysroot_src) == Path("/opt/toolchain/lib/rustlib/src/rust/library")
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out


def test_sysroot_without_rustc(monkeypatch):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    project = RustAnalyzerProject()
    with patch("subprocess.run", side_effect=FileNotFoundError("rustc")):
        with pytest.raises(FileNotFoundError):
            project.get_sysroot_src()
    assert project.sysroot_src == ""