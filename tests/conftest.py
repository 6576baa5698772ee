import pytest

from jsonapi_query import ResourceSchema


@pytest.fixture
def people() -> ResourceSchema:
    return ResourceSchema("people", {"id", "name", "email"})


@pytest.fixture
def articles(people: ResourceSchema) -> ResourceSchema:
    """
    articles -> author (people) -> articles (cycle)
    articles -> comments -> author (people)
    """
    comments = ResourceSchema("comments", {"id", "body"}, {"author": people})
    articles = ResourceSchema("articles", {"id", "title", "body", "created_at"}, {"author": people, "comments": comments})
    people.relate("articles", articles)
    return articles
