import json

from click.testing import CliRunner

from logoturtle.cli import main
from logoturtle.config import Config
from logoturtle.programs import SAMPLES


def test_samples():
    result = CliRunner().invoke(main, ["samples"])
    assert result.exit_code == 0
    for name in SAMPLES:
        assert f"{name}:" in result.output
    assert "square: Square with 80px sides (8 steps)" in result.output


def test_draw_sample(tmp_path):
    out = tmp_path / "square.html"
    result = CliRunner().invoke(main, ["draw", "--sample", "square", "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "Saved 8 lines" in result.output
    assert out.read_text().count("<line ") == 8


def test_draw_program_file(tmp_path):
    program = tmp_path / "prog.json"
    program.write_text(json.dumps([{"op": "repeat", "count": 3, "body": [{"op": "forward", "distance": 10}]}]))
    out = tmp_path / "prog.html"
    result = CliRunner().invoke(main, ["draw", str(program), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert out.read_text().count("<line ") == 3


def test_draw_warns_outside_canvas(tmp_path):
    out = tmp_path / "edge.html"
    result = CliRunner().invoke(main, ["draw", "-s", "square", "--x", "490", "-o", str(out)])
    assert result.exit_code == 0
    assert "outside the 500x500 canvas" in result.output


def test_draw_reports_turtle_errors(tmp_path):
    program = tmp_path / "bad.json"
    program.write_text(json.dumps([{"op": "pen_size", "size": 0}]))
    out = tmp_path / "bad.html"
    result = CliRunner().invoke(main, ["draw", str(program), "-o", str(out)])
    assert result.exit_code == 1
    assert "Pen size must be > 0" in result.output
    assert not out.exists()


def test_unknown_sample():
    result = CliRunner().invoke(main, ["trace", "--sample", "nope"])
    assert result.exit_code == 1
    assert "Unknown sample" in result.output


def test_file_and_sample_conflict(tmp_path):
    program = tmp_path / "p.json"
    program.write_text("[]")
    result = CliRunner().invoke(main, ["trace", str(program), "--sample", "simple"])
    assert result.exit_code == 2


def test_trace():
    result = CliRunner().invoke(main, ["trace", "--sample", "simple", "--angle=-90"])
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert len(lines) == 4
    assert lines[0] == "250.000 250.000 270.000 1 black"
    assert lines[1] == "250.000 200.000 270.000 1 black"


def test_init_config(tmp_path):
    path = tmp_path / "configs" / "turtle.json"
    result = CliRunner().invoke(main, ["init-config", str(path)])
    assert result.exit_code == 0
    assert Config.load(path) == Config()


def test_invalid_config_file(tmp_path):
    config = tmp_path / "bad.json"
    config.write_text(json.dumps({"pen": {"size": 0}}))
    result = CliRunner().invoke(main, ["trace", "-s", "simple", "-c", str(config)])
    assert result.exit_code == 1
    assert "pen.size" in result.output


def test_missing_config_file(tmp_path):
    result = CliRunner().invoke(main, ["trace", "-s", "simple", "-c", str(tmp_path / "none.json")])
    assert result.exit_code == 2
    assert "does not exist" in result.output
