import pytest


def _sections(s):
    return s.select('[data-testid="tools-section"]')


@pytest.mark.web
def test_tools_page_metadata(client, soup):
    r = client.get("/tools")
    assert r.status_code == 200
    s = soup(r.data)
    assert s.title.string == "Tools - Test Person"
    assert s.find("meta", attrs={"name": "description"})["content"] == "Things I use."
    assert s.h1.get_text(strip=True) == "Things I use."
    assert "A short list." in s.text


@pytest.mark.web
def test_groups_and_items_keep_authored_order(client, soup):
    s = soup(client.get("/tools").data)
    sections = _sections(s)
    assert [sec.h2.get_text(strip=True) for sec in sections] == ["Editors", "Empty shelf"]
    titles = [h3.get_text(strip=True) for h3 in sections[0].select("h3")]
    assert titles == ["Vim", "Nano", "Emacs"]


@pytest.mark.web
def test_href_controls_hyperlink(client, soup):
    s = soup(client.get("/tools").data)
    vim, nano, emacs = _sections(s)[0].select("h3")
    assert vim.a["href"] == "https://www.vim.org"
    assert vim.a["target"] == "_blank"
    assert nano.a is None
    assert nano.span.get_text(strip=True) == "Nano"
    # site-relative links stay in the same tab
    assert emacs.a["href"] == "/emacs"
    assert emacs.a.get("target") is None


@pytest.mark.web
def test_descriptions_render_beneath_titles(client, soup):
    s = soup(client.get("/tools").data)
    cards = _sections(s)[0].select('[data-testid="tool"]')
    assert [c.select_one(".card-description").get_text(strip=True) for c in cards] == [
        "Modal editing.",
        "Small and simple.",
        "An operating system.",
    ]


@pytest.mark.web
def test_empty_group_renders_title_and_empty_list(client, soup):
    s = soup(client.get("/tools").data)
    empty = _sections(s)[1]
    assert empty.h2.get_text(strip=True) == "Empty shelf"
    assert empty.ul is not None
    assert empty.ul.find_all("li") == []
