"""Tests for output_writer module."""

import json

import pytest

from FSResolver.file_types import FOLDER_OPEN
from FSResolver.models import Node, NodeKind, OutputFormat
from FSResolver.output_writer import OutputWriteError, render_output, write_outputs


def _tree() -> Node:
    child = Node(
        name="a.png",
        kind=NodeKind.FILE,
        category="image",
        path="/r/a.png",
        size=2048,
        depth=1,
    )
    return Node(
        name="r",
        kind=NodeKind.FOLDER,
        category=FOLDER_OPEN,
        path="/r",
        size=2048,
        depth=0,
        children=(child,),
    )


class TestRenderOutput:
    def test_text(self):
        assert render_output(_tree(), OutputFormat.TEXT) == (
            "📂 /r (2.00 KB)\n└── 🖼️ a.png (2.00 KB)\n"
        )

    def test_markdown_uses_links(self):
        text = render_output(_tree(), OutputFormat.MARKDOWN)
        assert '<a href="file:///r/a.png">a.png</a>' in text

    def test_json(self):
        data = json.loads(render_output(_tree(), OutputFormat.JSON))
        assert data["raw_size"] == 2048
        assert data["children"][0]["icon"] == "🖼️"

    def test_json_keeps_unicode(self):
        assert "🖼️" in render_output(_tree(), OutputFormat.JSON)


class TestWriteOutputs:
    def test_writes_fixed_names(self, tmp_path):
        outputs = {OutputFormat.TEXT: "tree\n", OutputFormat.JSON: "{}"}

        written = write_outputs(tmp_path, outputs)

        assert written == [
            tmp_path / "#FilesStructure.txt",
            tmp_path / "#FilesStructure.json",
        ]
        assert (tmp_path / "#FilesStructure.txt").read_text(encoding="utf-8") == "tree\n"
        assert not (tmp_path / "#FilesStructure.md").exists()

    def test_nothing_requested(self, tmp_path):
        assert write_outputs(tmp_path, {}) == []
        assert list(tmp_path.iterdir()) == []

    def test_unwritable_target(self, tmp_path):
        with pytest.raises(OutputWriteError):
            write_outputs(tmp_path / "missing-dir", {OutputFormat.TEXT: "x"})
