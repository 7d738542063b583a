"""Models of the WordPress REST API post payload (``/wp/v2/posts?_embed=true``)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Rendered(BaseModel):
    """A ``{"rendered": ...}`` field."""

    model_config = ConfigDict(extra="ignore")

    rendered: str = ""


class WPAuthor(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    name: str = ""
    slug: str = ""


class WPMedia(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    source_url: str | None = None
    alt_text: str = ""


class WPTerm(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    name: str = ""
    slug: str = ""
    taxonomy: str = ""


class WPEmbedded(BaseModel):
    """Embedded resources attached by ``_embed=true``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    author: list[WPAuthor] = Field(default_factory=list)
    featured_media: list[WPMedia] = Field(default_factory=list, alias="wp:featuredmedia")
    terms: list[list[WPTerm]] = Field(default_factory=list, alias="wp:term")


class WordPressPost(BaseModel):
    """Upstream post record; only the fields the site uses are modelled."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int
    date: str
    modified: str
    slug: str
    status: str = "publish"
    title: Rendered = Field(default_factory=Rendered)
    content: Rendered = Field(default_factory=Rendered)
    excerpt: Rendered = Field(default_factory=Rendered)
    author: int | None = None
    featured_media: int | None = None
    tags: list[int] = Field(default_factory=list)
    categories: list[int] = Field(default_factory=list)
    meta: Any = None
    embedded: WPEmbedded | None = Field(default=None, alias="_embedded")
