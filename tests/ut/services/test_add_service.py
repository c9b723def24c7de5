"""AddService 测试 - 目标目录、utils、all 模式、汇总状态"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path

import pytest

from voltvue.core.config import Config
from voltvue.core.exceptions import ComponentNotFoundError, ValidationError
from voltvue.core.models import AddRequest
from voltvue.services.add_service import AddService


class FakeSource:
    """直接返回已准备好的仓库目录"""

    def __init__(self, repo_dir: Path) -> None:
        self.repo_dir = repo_dir
        self.entered = 0

    @contextmanager
    def materialize(self):  # type: ignore[no-untyped-def]
        self.entered += 1
        yield self.repo_dir


@pytest.fixture
def service(volt_tree: Path) -> AddService:
    cfg = Config(collection_path="volt")
    return AddService(cfg, source=FakeSource(volt_tree.parent))


def _req(tmp_path: Path, *components: str, **kw) -> AddRequest:  # type: ignore[no-untyped-def]
    return AddRequest(components=list(components), cwd=str(tmp_path / "proj"), **kw)


class TestTargetDir:
    @pytest.mark.parametrize("src_dir, outdir, expected, label", [
        (True, "", "src/volt", "src/volt"),
        (False, "", "volt", "根目录 volt"),
        (True, "lib", "lib/volt", "lib/volt"),
        (False, "lib", "lib/volt", "lib/volt"),
    ])
    def test_target_dir(
        self, service: AddService, tmp_path: Path,
        src_dir: bool, outdir: str, expected: str, label: str,
    ) -> None:
        req = _req(tmp_path, "button", src_dir=src_dir, outdir=outdir)
        assert service.target_dir(req) == tmp_path / "proj" / expected
        assert service.install_location(req) == label


class TestAdd:
    def test_components_with_utils(self, service: AddService, tmp_path: Path) -> None:
        report = service.add(_req(tmp_path, "panel"))
        target = tmp_path / "proj" / "src" / "volt"

        assert report.mode == "components"
        assert report.utils_copied
        assert (target / "utils" / "index.ts").exists()
        assert (target / "panel" / "index.vue").exists()
        assert (target / "button" / "index.vue").exists()
        assert report.status == "success"
        assert report.exit_code == 0
        assert report.result.auto_sub_files() == {"button": ["index.vue"]}

    def test_missing_utils_is_warning(
        self, make_tree, tmp_path: Path, caplog: pytest.LogCaptureFixture,
    ) -> None:
        repo = make_tree({"button": {"index.vue": ""}}, name="repo/volt").parent
        svc = AddService(Config(collection_path="volt"), source=FakeSource(repo))
        report = svc.add(_req(tmp_path, "button"))
        assert not report.utils_copied
        assert report.status == "success"
        assert "未找到 utils" in caplog.text

    def test_all_copies_collection(self, service: AddService, tmp_path: Path) -> None:
        report = service.add(_req(tmp_path, "button", "all", src_dir=False))
        target = tmp_path / "proj" / "volt"

        assert report.mode == "all"
        assert report.result is None
        assert report.status == "success"
        assert (target / "dialog" / "index.vue").exists()
        assert (target / "utils" / "index.ts").exists()

    def test_all_missing_collection(self, tmp_path: Path) -> None:
        svc = AddService(Config(collection_path="nope"), source=FakeSource(tmp_path))
        with pytest.raises(ComponentNotFoundError):
            svc.add(_req(tmp_path, "all"))

    def test_all_failed(self, service: AddService, tmp_path: Path) -> None:
        report = service.add(_req(tmp_path, "ghost"))
        assert report.result.failure_count == 1
        assert report.result.success_count == 0
        assert report.status == "failed"
        assert report.exit_code == 1

    def test_partial(self, service: AddService, tmp_path: Path) -> None:
        report = service.add(_req(tmp_path, "ghost", "button"))
        assert report.status == "partial"
        assert report.exit_code == 0

    def test_no_deps(self, service: AddService, tmp_path: Path) -> None:
        report = service.add(_req(tmp_path, "panel", follow_deps=False))
        assert report.result.sub_files == {}
        assert not (tmp_path / "proj" / "src" / "volt" / "button").exists()

    def test_empty_request(self, service: AddService, tmp_path: Path) -> None:
        with pytest.raises(ValidationError):
            service.add(_req(tmp_path))

    def test_available(self, service: AddService) -> None:
        assert "utils" not in service.available()
        assert "panel" in service.available()
