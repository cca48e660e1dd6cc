import json
import subprocess
from pathlib import Path

from drillkit.project import Crate, RustAnalyzerProject


def test_add_path_only_accepts_rust_files():
    project = RustAnalyzerProject()
    project.add_path("exercises/quiz1.rs")
    project.add_path("exercises/README.md")
    project.add_path(Path("exercises/00_intro"))
    assert [c.root_module for c in project.crates] == ["exercises/quiz1.rs"]
    crate = project.crates[0]
    assert crate.edition == "2021"
    assert crate.deps == []
    assert crate.cfg == ["test"]


def test_exercises_to_json_collects_rust_files(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises" / "a").mkdir(parents=True)
    (tmp_path / "exercises" / "a" / "x.rs").write_text("fn main() {}")
    (tmp_path / "exercises" / "a" / "README.md").write_text("notes")
    (tmp_path / "exercises" / "b.rs").write_text("fn main() {}")
    project = RustAnalyzerProject()
    project.exercises_to_json()
    roots = [Path(c.root_module) for c in project.crates]
    assert roots == [Path("exercises/a/x.rs"), Path("exercises/b.rs")]


def test_exercises_to_json_empty_directory(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(str(tmp_path / "nothing"))
    assert project.crates == []


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/src/rust")
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    assert project.sysroot_src == "/src/rust"


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    calls = []

    def fake_run(args, **kwargs):
        calls.append(list(args))
        return subprocess.CompletedProcess(args, 0, b"/opt/toolchain\n", b"")

    monkeypatch.setattr(subprocess, "run", fake_run)
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    assert calls == [["rustc", "--print", "sysroot"]]
    parts = Path(project.sysroot_src).parts
    assert parts[-5:] == ("lib", "rustlib", "src", "rust", "library")
    assert project.sysroot_src.startswith("/opt/toolchain")
    assert capsys.readouterr().out == "Determined toolchain: /opt/toolchain\n\n"


def test_to_json_round_trip():
    project = RustAnalyzerProject(sysroot_src="/src", crates=[Crate("exercises/if1.rs")])
    data = json.loads(project.to_json())
    assert data == {
        "sysroot_src": "/src",
        "crates": [
            {"root_module": "exercises/if1.rs", "edition": "2021", "deps": [], "cfg": ["test"]}
        ],
    }
    assert " " not in project.to_json()


def test_write_to_disk(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/src")
    project.add_path("a.rs")
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    assert target.read_text(encoding="utf-8") == project.to_json()
    assert json.loads(target.read_text())["crates"][0]["root_module"] == "a.rs"