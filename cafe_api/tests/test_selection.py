from cafe_api.catalog.models import CafeQuery, CafeSelection, make_catalog
from cafe_api.catalog.selection import run_query, select_cafes

NAMES = ["Мир кофе", "Сладкоежка", "Кофе и завтраки", "Сытый студент", "Ложка и вилка"]


def test_select_without_filters_returns_everything():
    assert select_cafes(NAMES).names == tuple(NAMES)


def test_select_truncates_to_prefix():
    assert select_cafes(NAMES, count=3).names == tuple(NAMES[:3])
    assert select_cafes(NAMES, count=0).names == ()
    assert select_cafes(NAMES, count=50).names == tuple(NAMES)


def test_select_filters_case_insensitively():
    assert select_cafes(NAMES, search="КоФе").names == ("Мир кофе", "Кофе и завтраки")


def test_select_filters_before_truncating():
    assert select_cafes(NAMES, search="кофе", count=1).names == ("Мир кофе",)
    assert select_cafes(NAMES, search="кофе", count=5).names == ("Мир кофе", "Кофе и завтраки")


def test_select_empty_search_is_ignored():
    assert select_cafes(NAMES, search="").names == tuple(NAMES)


def test_render():
    assert CafeSelection(names=("a", "b", "c")).render() == "a,b,c"
    assert CafeSelection(names=("only",)).render() == "only"
    assert CafeSelection().render() == ""


def test_run_query_uses_city_list():
    catalog = make_catalog({"moscow": NAMES, "tula": ["Самовар", "Тульский пряник"]})
    selection = run_query(catalog, CafeQuery(city="tula", count=1))
    assert selection.names == ("Самовар",)
