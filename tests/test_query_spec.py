import dataclasses

import pytest

from jsonapi_query import IncludeTree, QuerySpec, SortDirection, SortField


def test_initial(articles) -> None:
    spec = QuerySpec.initial(articles)
    assert spec.sort == ()
    assert spec.filter == {}
    assert spec.fields == {}
    assert spec.includes == IncludeTree()


def test_spec_is_read_only(articles) -> None:
    spec = QuerySpec(articles, filter={"title": "x"}, fields={"articles": ["title"]})
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.sort = ()
    with pytest.raises(TypeError):
        spec.filter["title"] = "y"
    with pytest.raises(TypeError):
        spec.fields["people"] = frozenset()
    assert spec.fields["articles"] == frozenset({"title"})


def test_sort_normalization(articles) -> None:
    spec = QuerySpec(articles, sort=[("title", "desc")])
    assert spec.sort == (SortField("title", SortDirection.DESC),)
    assert str(spec.sort[0]) == "-title"
    assert str(SortField("title")) == "title"


def test_to_query_params(articles) -> None:
    spec = QuerySpec(
        articles,
        sort=[("created_at", SortDirection.DESC), ("title", SortDirection.ASC)],
        filter={"title": "foo"},
        fields={"articles": {"title", "id"}},
        includes={"comments": {"author": {}}},
    )
    assert spec.to_query_params() == {
        "fields": {"articles": "id,title"},
        "include": "comments.author",
        "filter": {"title": "foo"},
        "sort": "-created_at,title",
    }


def test_initial_to_query_params(articles) -> None:
    assert QuerySpec.initial(articles).to_query_params() == {"fields": {}, "include": "", "filter": {}, "sort": ""}


def test_spec_is_unhashable(articles) -> None:
    assert QuerySpec.__hash__ is None
    with pytest.raises(TypeError):
        hash(QuerySpec.initial(articles))
