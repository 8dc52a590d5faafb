"""Content document models — pure Pydantic v2 data types.

These models describe the shape of the editable site: a tree of named
sections holding localized copy, ordered item lists and image references.
The engine itself works on the plain JSON tree (see
``pagesmith.content.paths``); these models are the contract that tree is
validated against.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# JSON tree form of a ContentDocument
Document = dict[str, Any]


class Language(StrEnum):
    """Supported site languages."""

    EN = "en"
    CN = "cn"


class _Strict(BaseModel):
    model_config = ConfigDict(extra="forbid")


class LocalizedText(_Strict):
    """User-facing copy in both site languages."""

    en: str
    cn: str


def localize(text: LocalizedText | dict[str, str], language: Language | str) -> str:
    """Return the string for ``language`` from a localized text value."""
    lang = Language(language)
    if isinstance(text, LocalizedText):
        return getattr(text, lang.value)
    return text[lang.value]


# ---------------------------------------------------------------------------
# Items (addressed by list position; ``id`` is optional)
# ---------------------------------------------------------------------------


class TimelineItem(_Strict):
    """One milestone in the about-section timeline."""

    id: str | None = None
    year: str
    title: LocalizedText
    description: LocalizedText


class ServiceItem(_Strict):
    """One offered service."""

    id: str | None = None
    icon: str
    title: LocalizedText
    description: LocalizedText


class VideoItem(_Strict):
    """A playable testimonial video link."""

    id: str | None = None
    url: str


# Awards are bare localized strings
AwardItem = LocalizedText


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


class HeroSection(_Strict):
    title: LocalizedText
    subtitle: LocalizedText
    cta: LocalizedText


class AboutSection(_Strict):
    title: LocalizedText
    intro: LocalizedText
    timeline: list[TimelineItem] = Field(default_factory=list)


class ServicesSection(_Strict):
    title: LocalizedText
    items: list[ServiceItem] = Field(default_factory=list)


class AwardsSection(_Strict):
    title: LocalizedText
    items: list[AwardItem] = Field(default_factory=list)


class VideoTestimonialsSection(_Strict):
    title: LocalizedText
    items: list[VideoItem] = Field(default_factory=list)


class ContactSection(_Strict):
    title: LocalizedText
    desc: LocalizedText
    email: str
    phone: str
    location: LocalizedText


class ContentDocument(_Strict):
    """Root aggregate of the editable site content."""

    hero_image: str
    gallery_images: list[str] = Field(default_factory=list)
    hero: HeroSection
    about: AboutSection
    services: ServicesSection
    awards: AwardsSection
    testimonials: VideoTestimonialsSection
    contact: ContactSection

    def to_tree(self) -> Document:
        """Dump to the JSON tree form used by the engine."""
        return self.model_dump(mode="json", exclude_none=True)
