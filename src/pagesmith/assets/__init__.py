"""Assets domain — AI image generation into document slots."""

from pagesmith.assets.models import HERO_IMAGE, GenerationTarget, GenerationTasks
from pagesmith.assets.services import ImageGenerator

__all__ = [
    "HERO_IMAGE",
    "GenerationTarget",
    "GenerationTasks",
    "ImageGenerator",
]
