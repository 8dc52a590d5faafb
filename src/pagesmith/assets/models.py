"""Image generation targets."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_MODEL = "gemini-3-pro-image-preview"


class GenerationTarget(BaseModel):
    """A document location that can be filled by a generated image."""

    name: str
    path: list[str | int]
    prompt: str
    aspect_ratio: str = "16:9"
    image_size: str = "2K"


HERO_IMAGE = GenerationTarget(
    name="hero_image",
    path=["hero_image"],
    prompt=(
        "A cinematic, low-angle shot of ice hockey skates carving into the ice, "
        "dynamic motion blur, stadium lights reflecting on the ice surface, "
        "high contrast, professional sports photography, 8k resolution"
    ),
)


class GenerationTasks(BaseModel):
    """In-flight flags for generation targets, keyed by target name."""

    in_flight: dict[str, bool] = Field(default_factory=dict)

    def start(self, name: str) -> None:
        self.in_flight[name] = True

    def finish(self, name: str) -> None:
        self.in_flight[name] = False

    def is_in_flight(self, name: str) -> bool:
        return self.in_flight.get(name, False)
