"""End-to-end tests for the click command line against a temporary data dir."""

import re

import pytest
from click.testing import CliRunner

from catalog.infrastructure.cli.main import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("CATALOG_DATA_DIR", str(tmp_path / "data"))
    return CliRunner()


def _add(runner, name="Lamp", price="25.00", category="Home") -> str:
    result = runner.invoke(
        cli,
        [
            "product", "add",
            "--name", name,
            "--description", f"{name} description",
            "--price", price,
            "--category", category,
        ],
    )
    assert result.exit_code == 0, result.output
    return re.search(r"Product (\w+) ", result.output).group(1)


class TestProductCommands:

    def test_add_and_show(self, runner):
        product_id = _add(runner)
        result = runner.invoke(cli, ["product", "show", "--id", product_id])
        assert result.exit_code == 0
        assert "Name:        Lamp" in result.output
        assert "Price:       $25.00" in result.output
        assert "status=Active" in result.output

    def test_add_invalid_price_reports_error(self, runner):
        result = runner.invoke(
            cli,
            ["product", "add", "--name", "X", "--description", "Y",
             "--price", "-3", "--category", "Z"],
        )
        assert result.exit_code == 1
        assert "cannot be negative" in result.output

    def test_show_missing(self, runner):
        result = runner.invoke(cli, ["product", "show", "--id", "nope"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_list_with_filters(self, runner):
        _add(runner, "Phone", "50", "Electronics")
        _add(runner, "Television", "100", "Electronics")
        _add(runner, "Novel", "75", "Books")

        result = runner.invoke(
            cli,
            ["product", "list", "--category", "electronics",
             "--min-price", "40", "--max-price", "60"],
        )
        assert result.exit_code == 0
        assert "Phone" in result.output
        assert "Television" not in result.output
        assert "Novel" not in result.output

    def test_list_rejects_bad_price(self, runner):
        result = runner.invoke(cli, ["product", "list", "--min-price", "abc"])
        assert result.exit_code == 2
        assert "Invalid price" in result.output

    def test_deactivate_and_filter_by_status(self, runner):
        product_id = _add(runner, "Phone")
        _add(runner, "Radio")

        result = runner.invoke(cli, ["product", "deactivate", "--id", product_id])
        assert "is now Inactive" in result.output

        result = runner.invoke(cli, ["product", "list", "--status", "inactive"])
        assert "Phone" in result.output
        assert "Radio" not in result.output

        result = runner.invoke(cli, ["product", "activate", "--id", product_id])
        assert "is now Active" in result.output

    def test_page(self, runner):
        for i in range(3):
            _add(runner, f"Item{i}")
        result = runner.invoke(cli, ["product", "page", "--page", "2", "--size", "2"])
        assert result.exit_code == 0
        assert "Item2" in result.output
        assert "Page 2 of 2  (3 products total)" in result.output

    def test_search(self, runner):
        _add(runner, "Desk Lamp")
        _add(runner, "Chair")
        result = runner.invoke(cli, ["product", "search", "lamp"])
        assert "Desk Lamp" in result.output
        assert "Chair" not in result.output

    def test_update_then_delete(self, runner):
        product_id = _add(runner)
        result = runner.invoke(
            cli,
            ["product", "update", "--id", product_id, "--name", "Floor Lamp",
             "--description", "Tall", "--price", "80", "--category", "Home"],
        )
        assert result.exit_code == 0

        result = runner.invoke(cli, ["product", "delete", "--id", product_id])
        assert result.exit_code == 0

        result = runner.invoke(cli, ["product", "show", "--id", product_id])
        assert result.exit_code == 1


class TestImageCommands:

    def test_upload_and_export(self, runner, tmp_path):
        product_id = _add(runner)
        image = tmp_path / "lamp.png"
        image.write_bytes(b"\x89PNG fake image")

        result = runner.invoke(
            cli, ["product", "upload-image", "--id", product_id, "--file", str(image)]
        )
        assert result.exit_code == 0, result.output
        assert "image stored at /images/" in result.output

        out = tmp_path / "copy.png"
        result = runner.invoke(
            cli, ["product", "export-image", "--id", product_id, "--output", str(out)]
        )
        assert result.exit_code == 0, result.output
        assert out.read_bytes() == b"\x89PNG fake image"

    def test_upload_rejects_text_file(self, runner, tmp_path):
        product_id = _add(runner)
        notes = tmp_path / "notes.txt"
        notes.write_text("hello")

        result = runner.invoke(
            cli, ["product", "upload-image", "--id", product_id, "--file", str(notes)]
        )
        assert result.exit_code == 1
        assert "Unsupported image type" in result.output
