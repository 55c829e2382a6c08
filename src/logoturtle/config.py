"""Configuration management."""

import json
from pathlib import Path

from pydantic import BaseModel, Field

from .turtle import Pose, normalize_angle


class CanvasConfig(BaseModel):
    width: int = Field(500, gt=0)
    height: int = Field(500, gt=0)
    title: str = "Turtles & Python!"


class PenConfig(BaseModel):
    size: float = Field(1.0, gt=0)
    color: str = Field("black", min_length=1)


class StartConfig(BaseModel):
    x: float = 250.0
    y: float = 250.0
    angle: float = 0.0


class Config(BaseModel):
    canvas: CanvasConfig = CanvasConfig()
    pen: PenConfig = PenConfig()
    start: StartConfig = StartConfig()

    @classmethod
    def load(cls, path: str | Path = "configs/turtle.json") -> "Config":
        with open(path) as f:
            return cls(**json.load(f))

    def save(self, path: str | Path = "configs/turtle.json"):
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=4)

    def start_pose(self) -> Pose:
        return Pose(
            x=self.start.x,
            y=self.start.y,
            angle=normalize_angle(self.start.angle),
            pen_size=self.pen.size,
            pen_color=self.pen.color,
        )
