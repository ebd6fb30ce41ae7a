"""Tests for the Streamlit app."""

from pathlib import Path

from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parents[1] / "src" / "FSResolver" / "app.py")


def _app() -> AppTest:
    return AppTest.from_file(APP_PATH, default_timeout=30).run()


class TestAppPage:
    def test_renders_without_error(self):
        at = _app()
        assert not at.exception
        assert at.title[0].value == "FSResolver"

    def test_only_spacer_markdown_on_page(self):
        at = _app()
        # the header spacer is the only raw HTML the page injects
        assert [m.value for m in at.markdown] == ["<div style='height: 1.5rem'></div>"]


class TestAppScan:
    def test_scan_shows_summary(self, tmp_path):
        (tmp_path / "a.txt").write_bytes(b"x" * 10)
        at = _app()

        at.text_input(key="root").input(str(tmp_path))
        at.button(key="scan").click().run()

        assert not at.exception
        assert at.info[0].value.startswith(f"{tmp_path}: 10.00 B")
        assert not (tmp_path / "#FilesStructure.txt").exists()

    def test_missing_root_shows_error(self, tmp_path):
        at = _app()

        at.text_input(key="root").input(str(tmp_path / "missing"))
        at.button(key="scan").click().run()

        assert "Cannot read root directory" in at.error[0].value
