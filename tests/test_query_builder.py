from jsonapi_repository.domain.entities import QueryParams
from jsonapi_repository.services.query_builder import (
    build_query,
    build_sort,
    encode_query,
    render_query,
)


def test_list_filter_values_are_comma_joined():
    params = build_query({"status": ["a", "b"], "name": "bob"})

    assert params.filter == {"status": "a,b", "name": "bob"}


def test_empty_criteria_produce_no_filter():
    assert build_query({}).filter is None
    assert build_query(None).filter is None


def test_sort_preserves_order_and_direction():
    sort = build_sort({"name": "ASC", "created_at": "desc", "age": "Asc"})

    assert sort == ("name", "-created_at", "age")


def test_unknown_direction_sorts_descending():
    assert build_sort({"name": "ascending", "rank": ""}) == ("-name", "-rank")


def test_limit_and_offset_are_independent():
    assert build_query({}, limit=5).page == {"limit": 5}
    assert build_query({}, offset=20).page == {"offset": 20}
    assert build_query({}, limit=0, offset=0).page == {"limit": 0, "offset": 0}
    assert build_query({}).page is None


def test_encode_query_uses_bracket_notation():
    pairs = encode_query({"filter": {"role": "admin,owner"}, "page": {"limit": 10}, "x": None})

    assert pairs == [("filter[role]", "admin,owner"), ("page[limit]", "10")]


def test_find_by_scenario_wire_format():
    params = build_query({"role": ["admin", "owner"]}, {"created_at": "desc"}, 10, 0)

    assert render_query(params) == [
        ("filter[role]", "admin,owner"),
        ("sort", "-created_at"),
        ("page[limit]", "10"),
        ("page[offset]", "0"),
    ]


def test_include_is_merged_into_query():
    pairs = render_query(QueryParams(sort=("name",)), include=("author", "comments"))

    assert pairs == [("include", "author,comments"), ("sort", "name")]


def test_render_without_params_or_include_is_empty():
    assert render_query(None) == []


def test_boolean_filter_sent_as_one_or_zero():
    assert render_query(build_query({"active": True, "archived": False})) == [
        ("filter[active]", "1"),
        ("filter[archived]", "0"),
    ]


def test_null_filter_is_dropped():
    assert render_query(build_query({"deleted_at": None})) == []


def test_list_filter_skips_nulls_and_maps_booleans():
    params = build_query({"flag": [True, None, False], "id": [1, 2]})

    assert render_query(params) == [("filter[flag]", "1,0"), ("filter[id]", "1,2")]
