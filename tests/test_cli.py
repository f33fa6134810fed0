"""Tests for roomlayout/cli.py."""
import json

import pytest
from typer.testing import CliRunner

from roomlayout import Wall
from roomlayout.cli import app, build_demo_room


@pytest.fixture
def runner():
    return CliRunner()


class TestDemoRoom:
    def test_every_item_is_placed(self):
        room = build_demo_room()
        assert [f.name for f in room.furniture] == [
            "Sofa", "TV", "Coffee Table", "Chair", "Side Table", "Bookshelf", "Desk",
        ]
        assert len(room.doors) == 1
        assert len(room.windows) == 1

    def test_positions(self):
        placed = {f.name: f for f in build_demo_room().furniture}
        assert (placed["Sofa"].x, placed["Sofa"].y) == pytest.approx((2.8, 0.2))
        assert (placed["TV"].x, placed["TV"].y) == pytest.approx((1.9, 0.0))
        assert (placed["Coffee Table"].x, placed["Coffee Table"].y) == pytest.approx((2.0, 2.2))
        assert (placed["Chair"].x, placed["Chair"].y) == pytest.approx((2.1, 0.2))
        assert (placed["Side Table"].x, placed["Side Table"].y) == pytest.approx((2.1, 0.85))
        assert (placed["Bookshelf"].x, placed["Bookshelf"].y) == pytest.approx((4.6, 1.0))
        assert (placed["Desk"].x, placed["Desk"].y) == pytest.approx((0.15, 3.25))

    def test_wall_items(self):
        room = build_demo_room()
        assert room.doors[0].wall is Wall.SOUTH
        assert room.doors[0].position == pytest.approx(3.6)
        assert room.windows[0].wall is Wall.WEST
        assert room.windows[0].position == pytest.approx(1.4)


class TestShow:
    def test_lists_furniture(self, runner, layout_file):
        result = runner.invoke(app, ["show", str(layout_file)])
        assert result.exit_code == 0
        assert "Room: 6.0m x 4.0m x 2.7m" in result.stdout
        assert "Sofa" in result.stdout
        assert "Bay" in result.stdout

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(app, ["show", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "File not found" in result.stdout

    def test_placement_error(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({
            "room": {"width": 3, "length": 3, "height": 2.5},
            "furniture": [{"name": "Bed", "size": [4, 2, 0.6], "center": True}],
        }), encoding="utf-8")
        result = runner.invoke(app, ["show", str(path)])
        assert result.exit_code == 1
        assert "Error" in result.stdout


class TestRender:
    def test_prints_floor_plan(self, runner, layout_file):
        result = runner.invoke(app, ["render", str(layout_file), "--scale", "10"])
        assert result.exit_code == 0
        assert "FLOOR PLAN" in result.stdout
        assert "#" * 62 in result.stdout

    def test_saves_text_views(self, runner, layout_file, tmp_path):
        out = tmp_path / "views"
        result = runner.invoke(app, ["render", str(layout_file), "--out", str(out)])
        assert result.exit_code == 0
        assert (out / "complete_layout.txt").exists()
        assert not (out / "floor_plan.png").exists()

    def test_saves_images_only(self, runner, layout_file, tmp_path):
        out = tmp_path / "views"
        result = runner.invoke(
            app, ["render", str(layout_file), "--out", str(out), "--no-text", "--images"]
        )
        assert result.exit_code == 0
        assert (out / "floor_plan.png").exists()
        assert not (out / "floor_plan.txt").exists()

    def test_invalid_layout(self, runner, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        result = runner.invoke(app, ["render", str(path)])
        assert result.exit_code == 1


class TestExport:
    def test_writes_resolved_layout(self, runner, layout_file, tmp_path):
        out = tmp_path / "resolved.json"
        result = runner.invoke(app, ["export", str(layout_file), "--out", str(out)])
        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert [entry["name"] for entry in data["furniture"]] == [
            "Sofa", "TV", "Table", "Rug", "Lamp",
        ]
        assert data["furniture"][0]["at"] == pytest.approx([0.5, 3.0])


class TestDemo:
    def test_prints_demo(self, runner):
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 0
        assert "Room: 5.0m x 4.0m x 2.5m" in result.stdout
        assert "Coffee Table" in result.stdout

    def test_verbose_logs_placements(self, runner, tmp_path):
        result = runner.invoke(app, ["--verbose", "demo", "--out", str(tmp_path)])
        assert result.exit_code == 0
        assert (tmp_path / "floor_plan.txt").exists()
        assert "Resolved" in result.stdout
