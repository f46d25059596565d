import pytest
import requests

import chatbox.utils.page_fetch as page_fetch
from chatbox.extractors import LeetCodeExtractor, StaticExtractor, get_extractor
from chatbox.extractors.leetcode import LANGUAGE_SELECTOR

LANGUAGE_BUTTON = (
    '<button class="rounded items-center whitespace-nowrap inline-flex bg-transparent '
    'dark:bg-dark-transparent text-text-secondary group">{}</button>'
)


def _page(lines=(), language=None, description=None):
    head = f'<meta name="description" content="{description}">' if description else ""
    button = LANGUAGE_BUTTON.format(language) if language is not None else ""
    editor = "".join(f'<div class="view-line"><span>{line}</span></div>' for line in lines)
    return f"<html><head>{head}</head><body>{button}<div class='monaco'>{editor}</div></body></html>"


def test_extracts_code_language_and_placeholder_statement():
    html = _page(lines=["def f(): pass"], language="Python")
    ctx = LeetCodeExtractor.from_html(html).extract()
    assert ctx.user_code == "def f(): pass"
    assert ctx.programming_language == "Python"
    assert ctx.problem_statement == "Enter your problem statement here"


def test_lines_joined_in_document_order_verbatim():
    html = _page(lines=["class Solution:", "    def twoSum(self):", "        return []  "])
    ctx = LeetCodeExtractor.from_html(html).extract()
    assert ctx.user_code == "class Solution:\n    def twoSum(self):\n        return []  "


def test_no_lines_gives_empty_code():
    assert LeetCodeExtractor.from_html(_page()).extract().user_code == ""


@pytest.mark.parametrize("language", [None, ""])
def test_missing_or_empty_language_is_unknown(language):
    ctx = LeetCodeExtractor.from_html(_page(lines=["x"], language=language)).extract()
    assert ctx.programming_language == "UNKNOWN"


def test_language_selector_requires_every_class():
    html = '<button class="rounded items-center">Java</button>'
    assert LeetCodeExtractor.from_html(html).extract().programming_language == "UNKNOWN"
    assert "dark" in LANGUAGE_SELECTOR


def test_problem_statement_from_meta_description():
    ctx = LeetCodeExtractor.from_html(_page(description="Given an array...")).extract()
    assert ctx.problem_statement == "Given an array..."


def test_explicit_problem_statement_wins():
    ctx = LeetCodeExtractor.from_html(_page(description="meta"), problem_statement="host").extract()
    assert ctx.problem_statement == "host"


def test_page_is_reread_on_every_extract():
    pages = iter([_page(lines=["a"]), _page(lines=["a", "b"])])
    extractor = LeetCodeExtractor(lambda: next(pages))
    assert extractor.extract().user_code == "a"
    assert extractor.extract().user_code == "a\nb"


def test_from_file(tmp_path):
    file = tmp_path / "page.html"
    file.write_text(_page(lines=["print(1)"], language="Python3"), encoding="utf-8")
    ctx = LeetCodeExtractor.from_file(str(file)).extract()
    assert ctx.user_code == "print(1)"
    assert ctx.programming_language == "Python3"


def test_from_url_fetches_page(monkeypatch):
    captured = {}

    class DummyResponse:
        text = _page(lines=["x = 1"])

        def raise_for_status(self):
            return None

    def dummy_get(url, headers=None, **kwargs):
        captured["url"] = url
        captured["headers"] = headers or {}
        return DummyResponse()

    monkeypatch.setattr(page_fetch.requests, "get", dummy_get)
    ctx = LeetCodeExtractor.from_url("https://leetcode.com/problems/two-sum/", cookie="a=b").extract()

    assert ctx.user_code == "x = 1"
    assert captured["url"] == "https://leetcode.com/problems/two-sum/"
    assert captured["headers"]["Cookie"] == "a=b"


def test_fetch_errors_propagate(monkeypatch):
    def dummy_get(url, headers=None, **kwargs):
        raise requests.exceptions.ConnectionError("boom")

    monkeypatch.setattr(page_fetch.requests, "get", dummy_get)
    with pytest.raises(requests.exceptions.RequestException):
        page_fetch.fetch_page("https://example.com")


def test_static_extractor_and_update():
    extractor = StaticExtractor(problem_statement="p", programming_language="", user_code="a")
    assert extractor.extract().programming_language == "UNKNOWN"
    extractor.update(user_code="b")
    assert extractor.extract().user_code == "b"


def test_registry():
    assert isinstance(get_extractor("static"), StaticExtractor)
    with pytest.raises(ValueError):
        get_extractor("hackerrank")
