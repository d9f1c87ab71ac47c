import json
import subprocess
from pathlib import Path
from unittest.mock import patch

from rustlings.project import Crate, RustAnalyzerProject


def test_add_path_only_rust_files():
    project = RustAnalyzerProject()
    project.add_path("exercises/intro/intro1.rs")
    project.add_path("exercises/README.md")
    project.add_path("exercises/clippy/Cargo.toml")
    project.add_path("exercises")
    assert [c.root_module for c in project.crates] == ["exercises/intro/intro1.rs"]


def test_crate_defaults():
    crate = Crate(root_module="exercises/intro/intro1.rs")
    assert crate.to_dict() == {
        "root_module": "exercises/intro/intro1.rs",
        "edition": "2021",
        "deps": [],
        "cfg": ["test"],
    }


def test_exercises_to_json(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises" / "intro").mkdir(parents=True)
    (tmp_path / "exercises" / "intro" / "intro1.rs").write_text("fn main() {}\n")
    (tmp_path / "exercises" / "intro" / "README.md").write_text("# intro\n")
    (tmp_path / "exercises" / "quiz1.rs").write_text("fn main() {}\n")
    project = RustAnalyzerProject()
    project.exercises_to_json("exercises")
    roots = {c.root_module for c in project.crates}
    assert roots == {
        str(Path("exercises") / "intro" / "intro1.rs"),
        str(Path("exercises") / "quiz1.rs"),
    }


def test_exercises_to_json_empty(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    project = RustAnalyzerProject()
    project.exercises_to_json("exercises")
    assert project.crates == []


def test_get_sysroot_src(capsys):
    result = subprocess.CompletedProcess([], 0, stdout=b"/opt/toolchain\n", stderr=b"")
    project = RustAnalyzerProject()
    with patch("subprocess.run", return_value=result):
        project.get_sysroot_src()
    expected = Path("/opt/toolchain") / "lib" / "rustlib" / "src" / "rust" / "library"
    assert project.sysroot_src == str(expected)
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/opt/toolchain/library")
    project.add_path("exercises/intro/intro1.rs")
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    assert json.loads(target.read_text()) == project.to_dict()
    assert list(json.loads(target.read_text())) == ["sysroot_src", "crates"]