"""
Page composition: pair each page's metadata with the content it lays out.

The composer does not touch Flask; it returns a ``Page`` that
``portfolio.render.render_page`` turns into HTML.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .models import PageMeta, SiteContent


@dataclass(frozen=True)
class Page:
    meta: PageMeta
    template: str
    active: str
    context: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "context", MappingProxyType(dict(self.context)))


def compose_about(site: SiteContent, portrait: str | None = None) -> Page:
    """About page: headline, portrait, biography and social links."""
    about = site.about
    return Page(
        meta=about.meta,
        template="about.html",
        active="about",
        context={
            "name": about.name,
            "headline": about.headline,
            "portrait": portrait,
            "portrait_alt": about.portrait_alt,
            "bio": about.bio,
            "social_links": about.social_links,
        },
    )


def compose_tools(site: SiteContent) -> Page:
    """Tools page: heading, intro and one section per group."""
    tools = site.tools
    return Page(
        meta=tools.meta,
        template="tools.html",
        active="tools",
        context={
            "heading": tools.heading,
            "intro": tools.intro,
            "groups": tools.groups,
        },
    )


def compose_not_found(site: SiteContent, site_name: str | None = None) -> Page:
    """404 page. The title names ``site_name``, falling back to the owner."""
    return Page(
        meta=PageMeta(
            title=f"Page not found - {site_name or site.owner}",
            description="Sorry, we couldn’t find the page you’re looking for.",
        ),
        template="404.html",
        active="",
    )
