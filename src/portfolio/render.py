"""
Rendering helpers.

Sections and items are Jinja macros in ``templates/_components.html``.
The functions here call them (inside an app context). The app registers
them as template globals, so ``about.html`` and ``tools.html`` render their
components through the same entry points; ``render_tool`` is for rendering
a single card outside a page.
"""

from __future__ import annotations

from typing import Iterable

from flask import current_app, get_template_attribute, render_template
from markupsafe import Markup

from .models import BioParagraph, SocialLink, ToolEntry, ToolGroup
from .pages import Page

COMPONENTS = "_components.html"


def render_page(page: Page) -> str:
    """Render a composed page inside the site shell."""
    return render_template(
        page.template,
        meta=page.meta,
        active=page.active,
        site_name=current_app.config["SITE_NAME"],
        nav=current_app.config["SITE_CONTENT"].nav,
        **page.context,
    )


def render_section(group: ToolGroup) -> Markup:
    """Titled section with its entries as a list, in authored order."""
    return get_template_attribute(COMPONENTS, "tools_section")(group)


def render_tool(entry: ToolEntry) -> Markup:
    return get_template_attribute(COMPONENTS, "tool")(entry)


def render_social_link(link: SocialLink) -> Markup:
    return get_template_attribute(COMPONENTS, "social_link")(link)


def render_bio(paragraphs: Iterable[BioParagraph]) -> Markup:
    return get_template_attribute(COMPONENTS, "bio")(tuple(paragraphs))
