import pytest

from jsonapi_repository.domain.exceptions import DeserializationError
from jsonapi_repository.services.jsonapi_deserializer import JsonApiDeserializer


def test_single_resource():
    doc = {"data": {"id": 5, "type": "users", "attributes": {"name": "Bob"}}}

    result = JsonApiDeserializer().deserialize(doc)

    assert result == {"id": "5", "type": "users", "attributes": {"name": "Bob"}}


def test_collection_keeps_order():
    doc = {
        "data": [
            {"id": "2", "type": "users", "attributes": {"name": "Ann"}},
            {"id": "1", "type": "users", "attributes": {"name": "Bob"}},
        ]
    }

    result = JsonApiDeserializer().deserialize(doc)

    assert [r["id"] for r in result] == ["2", "1"]


def test_null_data_yields_none():
    assert JsonApiDeserializer().deserialize({"data": None}) is None


def test_relationships_resolved_against_included():
    doc = {
        "data": {
            "id": "1",
            "type": "articles",
            "attributes": {"title": "Hi"},
            "relationships": {
                "author": {"data": {"type": "people", "id": "9"}},
                "tags": {"data": [{"type": "tags", "id": "3"}]},
                "editor": {"data": None},
                "comments": {"links": {"related": "/articles/1/comments"}},
            },
        },
        "included": [
            {
                "id": "9",
                "type": "people",
                "attributes": {"name": "Eve"},
                "relationships": {"articles": {"data": [{"type": "articles", "id": "1"}]}},
            }
        ],
    }

    rels = JsonApiDeserializer().deserialize(doc)["relationships"]

    assert rels["author"]["attributes"] == {"name": "Eve"}
    assert rels["author"]["relationships"] == {
        "articles": {"data": [{"type": "articles", "id": "1"}]}
    }
    assert rels["tags"] == [{"type": "tags", "id": "3"}]
    assert rels["editor"] is None
    assert rels["comments"] == {"links": {"related": "/articles/1/comments"}}


def test_malformed_document_raises():
    with pytest.raises(DeserializationError):
        JsonApiDeserializer().deserialize({"data": {"id": "1", "attributes": {}}})
