"""Integration tests that run the actual CLI."""

import json
import subprocess
import sys

import pytest


def run_cli(*args, cwd, input=None):
    return subprocess.run(
        [sys.executable, "-m", "uicomposercli.main", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        input=input,
    )


@pytest.fixture
def button_file(tmp_path):
    path = tmp_path / "ui.json"
    path.write_text(
        json.dumps(
            {
                "type": "Button",
                "attributes": {"variant": "outline", "bogus": "x"},
                "slots": {
                    "children": [
                        {"type": "Text", "attributes": {"text": "Go"}, "slots": {}}
                    ]
                },
            }
        )
    )
    return path


class TestSchemaCommand:
    def test_prints_default_catalog(self, tmp_path):
        result = run_cli("schema", cwd=tmp_path)

        assert result.returncode == 0
        catalog = json.loads(result.stdout)
        assert list(catalog["components"]) == ["UserInterface", "Text", "Button", "Stack"]
        assert catalog["components"]["Button"]["slotNames"] == [
            "leftIcon",
            "children",
            "rightIcon",
        ]
        assert catalog["components"]["Text"]["attributes"] == {"text": {"kind": "text"}}

    def test_custom_catalog(self, tmp_path):
        (tmp_path / "catalog.yaml").write_text(
            "components:\n  Label:\n    primitive: Text\n    attributes:\n      text: {kind: text}\n"
        )
        result = run_cli("schema", "--catalog", "catalog.yaml", cwd=tmp_path)

        assert result.returncode == 0
        assert list(json.loads(result.stdout)["components"]) == ["Label"]

    def test_catalog_from_settings_file(self, tmp_path):
        (tmp_path / "catalogs").mkdir()
        (tmp_path / "catalogs" / "app.yaml").write_text(
            "components:\n  Box:\n    primitive: Stack\n    slots: [children]\n"
        )
        (tmp_path / "uicomposer.yaml").write_text("catalog: catalogs/app.yaml\n")
        result = run_cli("schema", cwd=tmp_path)

        assert result.returncode == 0
        assert list(json.loads(result.stdout)["components"]) == ["Box"]

    def test_unknown_primitive_fails(self, tmp_path):
        (tmp_path / "catalog.yaml").write_text(
            "components:\n  Slider:\n    primitive: Slider\n"
        )
        result = run_cli("schema", "-c", "catalog.yaml", cwd=tmp_path)

        assert result.returncode == 1
        assert "Unknown render primitive: Slider" in result.stderr


class TestRenderCommand:
    def test_renders_json(self, tmp_path, button_file):
        result = run_cli("render", str(button_file), cwd=tmp_path)

        assert result.returncode == 0
        node = json.loads(result.stdout)
        assert node["type"] == "Button"
        assert node["props"]["variant"] == "outline"
        assert "bogus" not in node["props"]
        assert node["props"]["children"] == [
            {"type": "Text", "key": "children0", "props": {"text": "Go"}}
        ]

    def test_renders_html(self, tmp_path, button_file):
        result = run_cli("render", str(button_file), "--html", cwd=tmp_path)

        assert result.returncode == 0
        assert 'data-component="Button"' in result.stdout
        assert "Go" in result.stdout

    def test_unknown_root_prints_null(self, tmp_path):
        path = tmp_path / "ui.json"
        path.write_text(json.dumps({"type": "Nope"}))
        result = run_cli("render", str(path), cwd=tmp_path)

        assert result.returncode == 0
        assert result.stdout.strip() == "null"

    def test_missing_file(self, tmp_path):
        result = run_cli("render", "missing.json", cwd=tmp_path)

        assert result.returncode == 1
        assert "File not found" in result.stderr

    def test_invalid_description(self, tmp_path):
        path = tmp_path / "ui.json"
        path.write_text("{not json")
        result = run_cli("render", str(path), cwd=tmp_path)

        assert result.returncode == 1
        assert "Invalid component description" in result.stderr


class TestServeCommand:
    STDIN = (
        "\n".join(
            json.dumps(m)
            for m in [
                {"type": "component-composer-ui", "payload": {"type": "Text", "attributes": {"text": "Hi"}}},
                {"type": "unknown"},
            ]
        )
        + "\n"
    )

    def test_handshake_then_renders(self, tmp_path):
        result = run_cli("serve", cwd=tmp_path, input=self.STDIN)

        assert result.returncode == 0
        lines = result.stdout.splitlines()
        assert len(lines) == 1
        handshake = json.loads(lines[0])
        assert handshake["type"] == "component-composer-schema"
        assert "Button" in handshake["payload"]["components"]

        # Each render is shown on stderr; the unknown message is not a render
        rendered = result.stderr.splitlines()
        assert len(rendered) == 1
        assert json.loads(rendered[0]) == {"type": "Text", "key": "none", "props": {"text": "Hi"}}

    def test_output_file_holds_display(self, tmp_path):
        result = run_cli("serve", "--output", "display.html", cwd=tmp_path, input=self.STDIN)

        assert result.returncode == 0
        assert result.stderr == ""
        assert (tmp_path / "display.html").read_text() == '<div class="App">Hi</div>'

    def test_output_file_shows_loading_without_renders(self, tmp_path):
        result = run_cli("serve", "-o", "display.html", cwd=tmp_path, input="")

        assert result.returncode == 0
        assert (tmp_path / "display.html").read_text() == '<div class="App">Loading...</div>'

    def test_invalid_settings_exit_code(self, tmp_path):
        (tmp_path / "uicomposer.yaml").write_text("max_depth: 1000\n")
        result = run_cli("serve", cwd=tmp_path, input="")

        assert result.returncode == 2
        assert "Invalid settings file" in result.stderr
        assert result.stdout == ""


def test_version(tmp_path):
    result = run_cli("--version", cwd=tmp_path)
    assert result.returncode == 0
    assert "uicomposer 0.1.0" in result.stdout
