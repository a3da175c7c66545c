import json

import pytest

from utils.evidence import (CONSOLE_NAME, TRACE_NAME, URL_NAME, attempt_label, discard_recordings,
                            evidence_dir, keep_recordings, reset_dirs, save_page_evidence)


@pytest.mark.unit
class TestEvidence:

    def test_evidence_dir_layout(self, tmp_path):
        target = evidence_dir("tests.ui.cart_test", "TestCartAdd", "test_add_single_item", 2, root=tmp_path)
        assert target == tmp_path / "cart_test" / "TestCartAdd" / "test_add_single_item" / "attempt_2"
        assert target.is_dir()

    def test_evidence_dir_without_class(self, tmp_path):
        target = evidence_dir("login_test", None, "test_x", 1, root=tmp_path)
        assert target.parent.parent.name == "no_class"
        assert target.name == attempt_label(1)

    def test_reset_dirs(self, tmp_path):
        stale = tmp_path / "videos"
        (stale / "attempt_1").mkdir(parents=True)
        (stale / "attempt_1" / "old.webm").write_bytes(b"x")
        reset_dirs(stale, tmp_path / "tracing")
        assert stale.is_dir() and not any(stale.iterdir())
        assert (tmp_path / "tracing").is_dir()

    def test_save_page_evidence(self, tmp_path):
        errors = [{"type": "error", "text": "boom", "location": "app.js:1"}]
        save_page_evidence("https://www.saucedemo.com/cart.html", errors, tmp_path)
        assert (tmp_path / URL_NAME).read_text(encoding="utf-8") == "https://www.saucedemo.com/cart.html"
        assert json.loads((tmp_path / CONSOLE_NAME).read_text(encoding="utf-8")) == errors

    def test_keep_recordings(self, tmp_path):
        video_dir = tmp_path / "videos"
        video_dir.mkdir()
        (video_dir / "page.webm").write_bytes(b"video")
        trace = tmp_path / "tracing" / TRACE_NAME
        trace.parent.mkdir()
        trace.write_bytes(b"trace")
        target = tmp_path / "artifacts"
        target.mkdir()

        kept = keep_recordings(video_dir, trace, target)
        assert sorted(p.name for p in kept) == ["page.webm", TRACE_NAME]
        assert not trace.exists()
        assert (target / "page.webm").read_bytes() == b"video"

    def test_keep_recordings_without_trace(self, tmp_path):
        target = tmp_path / "artifacts"
        target.mkdir()
        assert keep_recordings(tmp_path / "missing", tmp_path / TRACE_NAME, target) == []

    def test_discard_recordings(self, tmp_path):
        video_dir = tmp_path / "videos"
        video_dir.mkdir()
        discard_recordings(video_dir, tmp_path / "never-created")
        assert not video_dir.exists()
