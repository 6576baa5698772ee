import pytest

from jsonapi_query import ResourceSchema


def test_relationship_lookup(articles, people) -> None:
    assert articles.relationship("author") is people
    assert articles.relationship("bogus") is None
    assert articles.has_relationship("comments")
    assert not articles.has_relationship("Author")


def test_cyclic_schema_repr(articles, people) -> None:
    assert people.relationship("articles") is articles
    assert "relationships=['articles']" in repr(people)


def test_relationships_are_read_only(articles) -> None:
    rels = articles.relationships
    rels["bogus"] = articles
    assert not articles.has_relationship("bogus")


def test_relate_requires_schema(people) -> None:
    with pytest.raises(TypeError):
        people.relate("friends", {"name"})


def test_own_fields_frozen(people) -> None:
    assert people.own_fields == frozenset({"id", "name", "email"})
