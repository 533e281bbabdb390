"""Tests for the canvas, the sketch loop and exports."""

import json

import pytest

from crystallisation.canvas import SvgCanvas
from crystallisation.config import Settings
from crystallisation.export import export_image, export_png, export_svg, export_to_json
from crystallisation.model import Crystal
from crystallisation.random import Random
from crystallisation.sketch import Sketch


class TestSvgCanvas:
    """Tests for the headless canvas."""

    def test_fill_and_stroke(self):
        canvas = SvgCanvas(50, 50)
        canvas.begin_path()
        canvas.move_to(0, 0)
        canvas.line_to(10, 0)
        canvas.line_to(10, 10)
        canvas.close_path()
        canvas.fill()
        canvas.stroke()
        assert len(canvas.operations) == 2
        assert canvas.operations[0]["fill"] == "#fcfcfc"
        assert canvas.operations[1]["stroke"] == "#333"
        assert canvas.operations[1]["line_width"] == 0.25

    def test_begin_path_discards_previous(self):
        canvas = SvgCanvas(50, 50)
        canvas.move_to(0, 0)
        canvas.line_to(5, 5)
        canvas.begin_path()
        canvas.fill()
        assert canvas.operations == []

    def test_clear_whole_canvas(self):
        canvas = SvgCanvas(50, 50)
        canvas.move_to(0, 0)
        canvas.line_to(5, 5)
        canvas.stroke()
        canvas.clear_rect(0, 0, 50, 50)
        assert canvas.operations == []

    def test_clear_part(self):
        canvas = SvgCanvas(50, 50)
        canvas.clear_rect(10, 10, 5, 5)
        assert canvas.operations == [{"kind": "clear", "rect": (10, 10, 5, 5)}]

    def test_to_svg(self):
        canvas = SvgCanvas(50, 40)
        canvas.begin_path()
        canvas.move_to(0, 0)
        canvas.line_to(10, 0)
        canvas.line_to(10, 10)
        canvas.close_path()
        canvas.stroke()
        svg = canvas.to_svg()
        assert svg.startswith("<?xml")
        assert 'width="50" height="40"' in svg
        assert 'd="M 0.00 0.00 L 10.00 0.00 L 10.00 10.00 Z"' in svg
        assert svg.rstrip().endswith("</svg>")


class TestExport:
    """Tests for JSON and image export."""

    @pytest.fixture
    def grown(self):
        canvas = SvgCanvas(120, 80)
        crystal = Crystal(120, 80, Settings(min_side=5.0), Random(3), canvas)
        crystal.run(200)
        return crystal, canvas

    def test_json(self, grown):
        crystal, _ = grown
        data = json.loads(export_to_json(crystal))
        assert data["type"] == "FeatureCollection"
        features = {f["id"]: f for f in data["features"]}
        assert features["values"]["width"] == 120
        assert features["values"]["settings"]["min_side"] == 5.0
        assert len(features["polygons"]["coordinates"]) == len(crystal.polygons)
        assert features["polygons"]["generations"] == [p.generation for p in crystal.polygons]
        assert len(features["lines"]["geometries"]) == len(crystal.lines)

    def test_json_to_file(self, grown, tmp_path):
        crystal, _ = grown
        path = tmp_path / "crystal.json"
        assert export_to_json(crystal, str(path)) is None
        assert json.loads(path.read_text())["type"] == "FeatureCollection"

    def test_svg(self, grown, tmp_path):
        _, canvas = grown
        path = tmp_path / "crystal.svg"
        export_svg(canvas, str(path))
        assert path.read_text() == canvas.to_svg()
        assert export_svg(canvas) == canvas.to_svg()

    def test_png(self, grown, tmp_path):
        _, canvas = grown
        path = tmp_path / "crystal.png"
        export_png(canvas, str(path))
        assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_export_image_dispatch(self, grown, tmp_path):
        _, canvas = grown
        export_image(canvas, str(tmp_path / "a.svg"))
        export_image(canvas, str(tmp_path / "a.png"))
        assert (tmp_path / "a.svg").exists()
        assert (tmp_path / "a.png").exists()

    def test_export_image_unsupported(self, grown, tmp_path):
        _, canvas = grown
        with pytest.raises(ValueError):
            export_image(canvas, str(tmp_path / "a.bmp"))


class TestSketch:
    """Tests for the frame loop."""

    def test_paused_tick_does_nothing(self):
        sketch = Sketch(100, 100, Settings(), seed=1)
        assert not sketch.running
        assert sketch.tick() == 0
        assert sketch.frames == 0
        assert len(sketch.crystal.polygons) == 1

    def test_toggle(self):
        sketch = Sketch(100, 100, Settings(), seed=1)
        sketch.toggle()
        assert sketch.running
        sketch.toggle()
        assert not sketch.running

    def test_tick_runs_iterations(self):
        sketch = Sketch(200, 200, Settings(iterations=25), seed=1)
        sketch.start()
        accepted = sketch.tick()
        assert sketch.attempts == 25
        assert sketch.accepted == accepted
        assert sketch.accepted + sketch.rejected == 25
        assert len(sketch.crystal.polygons) == 1 + accepted

    def test_run_frames(self):
        sketch = Sketch(200, 200, Settings(iterations=10), seed=4)
        sketch.run(6)
        stats = sketch.stats()
        assert stats["frames"] == 6
        assert stats["attempts"] == 60
        assert stats["polygons"] == 1 + stats["accepted"]

    def test_stops_when_exhausted(self):
        sketch = Sketch(100, 100, Settings(), seed=1)
        sketch.crystal.polygons = []
        sketch.run(5)
        assert not sketch.running
        assert sketch.frames == 1

    def test_settings_changes_apply_live(self):
        sketch = Sketch(200, 200, Settings(iterations=5), seed=1)
        sketch.start()
        sketch.tick()
        sketch.settings.iterations = 8
        sketch.tick()
        assert sketch.attempts == 13

    def test_float_iterations_from_controls(self):
        sketch = Sketch(200, 200, Settings(), seed=1)
        sketch.settings.update(iterations=5.0)
        sketch.start()
        sketch.tick()
        assert sketch.attempts == 5

    def test_clear_keeps_polygons(self):
        sketch = Sketch(200, 200, Settings(), seed=2)
        sketch.run(3)
        polygons = len(sketch.crystal.polygons)
        sketch.clear()
        assert sketch.canvas.operations == []
        assert len(sketch.crystal.polygons) == polygons

    def test_reset(self):
        sketch = Sketch(200, 200, Settings(), seed=2)
        sketch.run(3)
        sketch.reset()
        assert len(sketch.crystal.polygons) == 1
        assert sketch.crystal.lines == []
        assert sketch.canvas.operations == []
        assert sketch.stats()["accepted"] == 0

    def test_resize(self):
        sketch = Sketch(200, 200, Settings(), seed=2)
        sketch.run(2)
        sketch.resize(300, 100)
        assert sketch.width == 300
        assert sketch.crystal.polygons[0].bounds() == (0, 0, 300, 100)

    def test_draw_lines(self):
        sketch = Sketch(200, 200, Settings(), seed=2)
        sketch.run(3)
        sketch.clear()
        sketch.draw_lines()
        chords = sketch.stats()["accepted"]
        # one stroke per chord plus the outline
        assert len(sketch.canvas.operations) == chords + 1

    def test_same_seed_same_picture(self):
        first = Sketch(150, 150, Settings(), seed=77)
        second = Sketch(150, 150, Settings(), seed=77)
        first.run(5)
        second.run(5)
        assert first.canvas.to_svg() == second.canvas.to_svg()

    def test_export(self, tmp_path):
        sketch = Sketch(100, 100, Settings(), seed=3)
        sketch.run(2)
        sketch.export(str(tmp_path / "out.svg"))
        sketch.export(str(tmp_path / "out.json"))
        assert (tmp_path / "out.svg").read_text().startswith("<?xml")
        assert json.loads((tmp_path / "out.json").read_text())["type"] == "FeatureCollection"
