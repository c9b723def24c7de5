"""LocalCopier 单元测试"""

from __future__ import annotations

from pathlib import Path

from voltvue.utils.fs import LocalCopier


class TestLocalCopier:
    def test_copy_directory_merges(self, tmp_path: Path) -> None:
        src = tmp_path / "src"
        (src / "sub").mkdir(parents=True)
        (src / "a.vue").write_text("new")
        (src / "sub" / "b.vue").write_text("b")
        dst = tmp_path / "dst"
        dst.mkdir()
        (dst / "a.vue").write_text("old")
        (dst / "keep.vue").write_text("keep")

        LocalCopier().copy_recursive(src, dst)

        assert (dst / "a.vue").read_text() == "new"
        assert (dst / "sub" / "b.vue").read_text() == "b"
        assert (dst / "keep.vue").exists()

    def test_copy_file_creates_parent(self, tmp_path: Path) -> None:
        src = tmp_path / "icon.vue"
        src.write_text("i")
        dst = tmp_path / "out" / "button" / "icon.vue"
        LocalCopier().copy_recursive(src, dst)
        assert dst.read_text() == "i"

    def test_ensure_dir_idempotent(self, tmp_path: Path) -> None:
        c = LocalCopier()
        c.ensure_dir(tmp_path / "x" / "y")
        c.ensure_dir(tmp_path / "x" / "y")
        assert c.exists(tmp_path / "x" / "y")

    def test_remove_recursive(self, tmp_path: Path) -> None:
        c = LocalCopier()
        d = tmp_path / "d"
        (d / "e").mkdir(parents=True)
        f = tmp_path / "f.txt"
        f.write_text("f")
        c.remove_recursive(d)
        c.remove_recursive(f)
        c.remove_recursive(tmp_path / "absent")
        assert not d.exists()
        assert not f.exists()
