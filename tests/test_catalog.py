import pytest

from mediahive import seed_demo_data


@pytest.fixture
def seeded(system):
    seed_demo_data(system)
    return system


def titles(items):
    return sorted(m.title for m in items)


def test_free_text_search_is_case_insensitive(seeded):
    assert titles(seeded.search("MARTIN")) == ["Clean Code", "Refactoring"]
    assert titles(seeded.search("floyd")) == ["Rock Legends"]
    assert titles(seeded.search("isbn-2")) == ["Effective Java"]


def test_free_text_search_matches_ids(seeded):
    first = seeded.media.list_all()[0]
    assert first in seeded.search(first.media_id.lower())


@pytest.mark.parametrize("query", [None, ""])
def test_empty_query_matches_everything(seeded, query):
    assert len(seeded.search(query)) == 7


def test_search_by_title(seeded):
    assert titles(seeded.catalog.search_by_title("co")) == ["Classical Collection", "Clean Code"]
    assert len(seeded.catalog.search_by_title(None)) == 7


def test_search_by_author_covers_artists(seeded):
    assert titles(seeded.catalog.search_by_author("mozart")) == ["Classical Collection"]
    assert titles(seeded.catalog.search_by_author("bloch")) == ["Effective Java"]


def test_search_by_isbn_is_exact(seeded):
    assert titles(seeded.catalog.search_by_isbn("  isbn-300 ")) == ["Design Patterns"]
    assert seeded.catalog.search_by_isbn("ISBN-3") == []
    assert seeded.catalog.search_by_isbn(None) == []


def test_seed_data(seeded):
    assert len(seeded.users.list_all()) == 3
    assert len(seeded.admins.list_all()) == 2
    assert seeded.user_service.find_by_email("mona@yahoo.com").name == "mona"
