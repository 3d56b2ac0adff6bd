"""
conftest.py
-----------
Shared pytest fixtures for the work list generator tests.
"""
import pytest


PAGE_WITH_LIST = (
    "<html><head><title>Works</title></head><body>"
    "<p>intro</p>"
    '<div id="work-list"><span>stale</span><ul><li>gone</li></ul></div>'
    "<p>outro</p>"
    "</body></html>"
)

PAGE_WITHOUT_LIST = (
    "<html><head><title>Works</title></head><body><p>intro</p></body></html>"
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep ambient config files and env overrides out of every test."""
    monkeypatch.delenv("WORK_LIST_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def source_dir(tmp_path):
    """Directory mixing valid and invalid yymmdd_label names."""
    directory = tmp_path / "works"
    directory.mkdir()
    for name in (
        "240101_demo.txt",
        "100101_old.md",
        "150101_mid-dle-part.txt",
        "notes.txt",
        "nodate_label.txt",
        "240101_a_b.txt",
    ):
        (directory / name).write_text("x", encoding="utf-8")
    (directory / "230101_folder").mkdir()
    return directory


@pytest.fixture
def page_with_list(tmp_path):
    """HTML file that already holds a work list container."""
    path = tmp_path / "index.html"
    path.write_text(PAGE_WITH_LIST, encoding="utf-8")
    return path


@pytest.fixture
def page_without_list(tmp_path):
    """HTML file with no work list container."""
    path = tmp_path / "plain.html"
    path.write_text(PAGE_WITHOUT_LIST, encoding="utf-8")
    return path


@pytest.fixture
def markup_with_list():
    """Markup of a page that already holds a work list container."""
    return PAGE_WITH_LIST


@pytest.fixture
def markup_without_list():
    """Markup of a page with no work list container."""
    return PAGE_WITHOUT_LIST
