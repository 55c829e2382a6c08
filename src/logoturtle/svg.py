"""SVG/HTML document generation from turtle paths."""

from html import escape
from pathlib import Path
from typing import Iterable

from .config import Config
from .evaluator import run
from .path import Segment, segments
from .program import Program
from .turtle import Pose


class SvgExporter:
    """Exports line segments to an HTML page holding one SVG drawing."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.canvas = self.config.canvas

    def line(self, segment: Segment) -> str:
        a, b = segment.start, segment.end
        return (
            f'<line x1="{a.x:.1f}" y1="{a.y:.1f}" x2="{b.x:.1f}" y2="{b.y:.1f}" '
            f'stroke="{escape(segment.pen_color)}" stroke-width="{segment.pen_size:g}" />'
        )

    def svg(self, lines: Iterable[Segment]) -> str:
        out = [f'    <svg width="{self.canvas.width}" height="{self.canvas.height}">']
        out.extend(f"      {self.line(s)}" for s in lines)
        out.append("    </svg>")
        return "\n".join(out)

    def export(self, lines: Iterable[Segment], title: str | None = None) -> str:
        """Wrap the SVG drawing in an HTML page."""
        heading = escape(title if title is not None else self.canvas.title)
        return "\n".join(
            [
                "<html>",
                "<body>",
                f"  <h1>{heading}</h1>",
                self.svg(lines),
                "</body>",
                "</html>",
                "",
            ]
        )


def draw(initial_pose: Pose, program: Program, config: Config | None = None) -> str:
    """Run a program and render its path as an HTML document."""
    return SvgExporter(config).export(segments(run(initial_pose, program)))


def save_document(content: str, path: str | Path = "turtles.html") -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
