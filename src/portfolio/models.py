"""
Content records for the portfolio pages.

Every record is a frozen dataclass built once from literals in
``portfolio.content``. Construction checks catch authoring mistakes
(empty titles, non-URI links) when the module is imported, so nothing
needs validating at request time.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Tuple
from urllib.parse import urlparse


class ContentError(ValueError):
    """Raised when a static content record is malformed."""


class IconKind(enum.Enum):
    """Glyphs available next to a social link."""

    TWITTER = "twitter"
    GITHUB = "github"
    LINKEDIN = "linkedin"
    MAIL = "mail"


# ---------------- helpers ----------------

_LINK_SCHEMES = {"http", "https", "mailto"}


def _require_text(value: str, what: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ContentError(f"{what} must be a non-empty string")


def _require_uri(url: str, what: str) -> None:
    _require_text(url, what)
    parts = urlparse(url)
    if parts.scheme not in _LINK_SCHEMES:
        raise ContentError(f"{what} has unsupported scheme: {url!r}")
    # mailto: carries the address in the path, web links need a host
    if parts.scheme == "mailto":
        if "@" not in parts.path:
            raise ContentError(f"{what} is not a mail address: {url!r}")
    elif not parts.netloc:
        raise ContentError(f"{what} has no host: {url!r}")


def is_external(url: Optional[str]) -> bool:
    """True for absolute links that leave the site (http(s) or mailto)."""
    if not url:
        return False
    return urlparse(url).scheme in _LINK_SCHEMES


# ---------------- entries ----------------

@dataclass(frozen=True)
class PageMeta:
    title: str
    description: str

    def __post_init__(self) -> None:
        _require_text(self.title, "PageMeta.title")
        _require_text(self.description, "PageMeta.description")


@dataclass(frozen=True)
class BioParagraph:
    """One paragraph of the About body. ``emphasis`` renders it bold."""

    text: str
    emphasis: bool = False

    def __post_init__(self) -> None:
        _require_text(self.text, "BioParagraph.text")


@dataclass(frozen=True)
class SocialLink:
    """A labelled external link with an icon.

    ``separated`` draws a divider above the link (used for the mail address).
    """

    label: str
    url: str
    icon: IconKind
    separated: bool = False

    def __post_init__(self) -> None:
        _require_text(self.label, "SocialLink.label")
        _require_uri(self.url, "SocialLink.url")
        if not isinstance(self.icon, IconKind):
            raise ContentError(f"SocialLink.icon must be an IconKind, got {self.icon!r}")


@dataclass(frozen=True)
class ToolEntry:
    title: str
    description: str
    href: Optional[str] = None

    def __post_init__(self) -> None:
        _require_text(self.title, "ToolEntry.title")
        _require_text(self.description, "ToolEntry.description")
        if self.href is not None:
            _require_text(self.href, "ToolEntry.href")

    @property
    def external(self) -> bool:
        return is_external(self.href)


@dataclass(frozen=True)
class ToolGroup:
    """A titled, ordered run of tool entries. ``items`` may be empty."""

    title: str
    items: Tuple[ToolEntry, ...] = ()

    def __post_init__(self) -> None:
        _require_text(self.title, "ToolGroup.title")
        # lists are accepted for convenience but stored as a tuple
        object.__setattr__(self, "items", tuple(self.items))


# ---------------- pages ----------------

@dataclass(frozen=True)
class AboutContent:
    meta: PageMeta
    name: str
    headline: str
    portrait_alt: str = ""
    bio: Tuple[BioParagraph, ...] = ()
    social_links: Tuple[SocialLink, ...] = ()

    def __post_init__(self) -> None:
        _require_text(self.name, "AboutContent.name")
        _require_text(self.headline, "AboutContent.headline")
        object.__setattr__(self, "bio", tuple(self.bio))
        object.__setattr__(self, "social_links", tuple(self.social_links))


@dataclass(frozen=True)
class ToolsContent:
    meta: PageMeta
    heading: str
    intro: str
    groups: Tuple[ToolGroup, ...] = ()

    def __post_init__(self) -> None:
        _require_text(self.heading, "ToolsContent.heading")
        object.__setattr__(self, "groups", tuple(self.groups))


@dataclass(frozen=True)
class SiteContent:
    """Everything the site renders, handed to the app through its config."""

    owner: str
    about: AboutContent
    tools: ToolsContent
    nav: Tuple[Tuple[str, str], ...] = field(
        default=(("about", "About"), ("tools", "Tools"))
    )

    def __post_init__(self) -> None:
        _require_text(self.owner, "SiteContent.owner")
        object.__setattr__(self, "nav", tuple(tuple(item) for item in self.nav))
