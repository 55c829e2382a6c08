"""CLI for logoturtle."""

from pathlib import Path

import click

from .config import Config
from .errors import TurtleError
from .turtle import Pose, normalize_angle


def _load(program_file: Path | None, sample: str | None, config_path: Path | None):
    from .loader import load_program_file
    from .programs import get_sample

    if program_file and sample:
        raise click.UsageError("Pass either PROGRAM_FILE or --sample, not both")
    try:
        config = Config.load(config_path) if config_path else Config()
        if program_file:
            program = load_program_file(program_file)
        else:
            program = get_sample(sample or "simple").program
    except (TurtleError, ValueError, OSError) as e:
        raise click.ClickException(str(e))
    return config, program


def _start(config: Config, x: float | None, y: float | None, angle: float | None) -> Pose:
    pose = config.start_pose()
    return Pose(
        x=pose.x if x is None else x,
        y=pose.y if y is None else y,
        angle=pose.angle if angle is None else normalize_angle(angle),
        pen_size=pose.pen_size,
        pen_color=pose.pen_color,
    )


def _run(start: Pose, program):
    from .evaluator import run

    try:
        return run(start, program)
    except TurtleError as e:
        raise click.ClickException(click.style(str(e), fg="red"))


def program_options(f):
    f = click.argument(
        "program_file", required=False, type=click.Path(exists=True, dir_okay=False, path_type=Path)
    )(f)
    f = click.option("--sample", "-s", help="Sample program name")(f)
    f = click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Config JSON",
    )(f)
    f = click.option("--x", type=float, help="Start x")(f)
    f = click.option("--y", type=float, help="Start y")(f)
    f = click.option("--angle", type=float, help="Start heading in degrees")(f)
    return f


@click.group()
def main():
    """logoturtle - Turtle programs to SVG."""
    pass


@main.command()
@program_options
@click.option("--output", "-o", default="turtles.html", type=Path)
def draw(program_file, sample, config_path, x, y, angle, output: Path):
    """Render a program to an HTML page."""
    from .path import bounds, segments
    from .svg import SvgExporter, save_document

    config, program = _load(program_file, sample, config_path)
    trace = _run(_start(config, x, y, angle), program)

    box = bounds(trace)
    canvas = config.canvas
    if box[0] < 0 or box[1] < 0 or box[2] > canvas.width or box[3] > canvas.height:
        click.echo(
            click.style(
                f"Warning: path spans ({box[0]:.1f}, {box[1]:.1f})-({box[2]:.1f}, {box[3]:.1f}), "
                f"outside the {canvas.width}x{canvas.height} canvas",
                fg="yellow",
            )
        )

    lines = segments(trace)
    path = save_document(SvgExporter(config).export(lines), output)
    click.echo(f"Saved {len(lines)} lines → {path}")


@main.command()
@program_options
def trace(program_file, sample, config_path, x, y, angle):
    """Print every pose the turtle goes through."""
    config, program = _load(program_file, sample, config_path)
    for pose in _run(_start(config, x, y, angle), program):
        click.echo(f"{pose.x:.3f} {pose.y:.3f} {pose.angle:.3f} {pose.pen_size:g} {pose.pen_color}")


@main.command()
def samples():
    """List sample programs."""
    from .evaluator import count_steps
    from .programs import SAMPLES

    for name, s in SAMPLES.items():
        click.echo(f"{name}: {s.description} ({count_steps(s.program)} steps)")


@main.command("init-config")
@click.argument("path", type=Path, default=Path("configs/turtle.json"))
def init_config(path: Path):
    """Write the default config."""
    path.parent.mkdir(parents=True, exist_ok=True)
    Config().save(path)
    click.echo(f"Saved: {path}")


if __name__ == "__main__":
    main()
