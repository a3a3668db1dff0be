"""
Flask app for the portfolio site.

- Factory: create_app(config=None)
- Routes:
    GET /  and /about  -> About page (bio, portrait, social links)
    GET /tools         -> Tools page (grouped entries)
    GET /uses          -> 301 to /tools (old duplicate of the Tools page)
    anything else      -> 404 page in the same shell
- Content is injected via app.config["SITE_CONTENT"] (a SiteContent);
  tests swap in their own.
"""

from __future__ import annotations

import os

from flask import Flask, redirect, request, url_for

from .content import SITE_CONTENT
from .icons import icon_svg
from .models import SiteContent, is_external
from .pages import compose_about, compose_not_found, compose_tools
from .render import (
    render_bio,
    render_page,
    render_section,
    render_social_link,
)


# --------------- factory ---------------

def create_app(config: dict | None = None) -> Flask:
    app = Flask(__name__, template_folder="templates", static_folder="static")
    app.config.update(
        TESTING=False,
        SITE_CONTENT=SITE_CONTENT,
        SITE_NAME=os.getenv("PORTFOLIO_SITE_NAME"),
        PORTRAIT_IMAGE="images/portrait.svg",
        LOG_LEVEL=os.getenv("PORTFOLIO_LOG_LEVEL", "INFO"),
    )
    if config:
        app.config.update(config)

    site = app.config["SITE_CONTENT"]
    if not isinstance(site, SiteContent):
        raise TypeError(
            f"SITE_CONTENT must be a SiteContent, got {type(site).__name__}"
        )
    if not app.config["SITE_NAME"]:
        app.config["SITE_NAME"] = site.owner

    # app.logger otherwise inherits the root level (WARNING) outside debug mode
    level = app.config["LOG_LEVEL"]
    app.logger.setLevel(level.upper() if isinstance(level, str) else level)

    # helpers the templates call
    app.jinja_env.globals.update(
        icon_svg=icon_svg,
        is_external=is_external,
        render_bio=render_bio,
        render_section=render_section,
        render_social_link=render_social_link,
    )

    app.logger.info(
        "portfolio for %s: %d bio paragraphs, %d tool groups",
        app.config["SITE_NAME"],
        len(site.about.bio),
        len(site.tools.groups),
    )

    # --------------- routes ---------------

    @app.get("/")
    @app.get("/about")
    def about():
        """Bio (left), portrait (right), social links below."""
        portrait = app.config.get("PORTRAIT_IMAGE")
        portrait_url = url_for("static", filename=portrait) if portrait else None
        return render_page(compose_about(app.config["SITE_CONTENT"], portrait_url))

    @app.get("/tools")
    def tools():
        """One card list per tool group."""
        return render_page(compose_tools(app.config["SITE_CONTENT"]))

    @app.get("/uses")
    def uses():
        return redirect(url_for("tools"), code=301)

    @app.errorhandler(404)
    def not_found(_err):
        app.logger.warning("404 for %s", request.path)
        return render_page(
            compose_not_found(app.config["SITE_CONTENT"], app.config["SITE_NAME"])
        ), 404

    return app
