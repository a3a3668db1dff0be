import pytest
from bs4 import BeautifulSoup

from portfolio.app import create_app
from portfolio.models import (
    AboutContent,
    BioParagraph,
    IconKind,
    PageMeta,
    SiteContent,
    SocialLink,
    ToolEntry,
    ToolGroup,
    ToolsContent,
)


@pytest.fixture
def site():
    """Small hand-made site so tests don't depend on the real biography."""
    about = AboutContent(
        meta=PageMeta("About - Test Person", "Test Person lives somewhere nice."),
        name="Test Person",
        headline="I live somewhere nice.",
        bio=[BioParagraph("paragraph A"), BioParagraph("paragraph B")],
        social_links=[
            SocialLink("Follow on GitHub", "https://github.com/x", IconKind.GITHUB),
            SocialLink("me@example.com", "mailto:me@example.com", IconKind.MAIL, separated=True),
        ],
    )
    tools = ToolsContent(
        meta=PageMeta("Tools - Test Person", "Things I use."),
        heading="Things I use.",
        intro="A short list.",
        groups=[
            ToolGroup(
                "Editors",
                [
                    ToolEntry("Vim", "Modal editing.", href="https://www.vim.org"),
                    ToolEntry("Nano", "Small and simple."),
                    ToolEntry("Emacs", "An operating system.", href="/emacs"),
                ],
            ),
            ToolGroup("Empty shelf", []),
        ],
    )
    return SiteContent(owner="Test Person", about=about, tools=tools)


@pytest.fixture
def app(site):
    return create_app({"TESTING": True, "SITE_CONTENT": site})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def soup():
    def _s(html: bytes | str):
        return BeautifulSoup(html, "lxml")
    return _s
