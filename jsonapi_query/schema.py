"""
Resource schema: the allow-lists a query is validated against

A schema holds the resource type name, the fields that can be selected with a sparse fieldset
and the relationships to other schemas. Resources can reference each other, so the relationship
graph may contain cycles, eg.

    articles = ResourceSchema("articles", {"title", "body"})
    people = ResourceSchema("people", {"name"})
    articles.relate("author", people)
    people.relate("articles", articles)
"""
from typing import Dict, Iterable, Mapping, Optional


class ResourceSchema:
    """
    Per-type allow-list of own fields and named relationships to other schemas
    """

    __slots__ = ("type_name", "own_fields", "_relationships")

    def __init__(
        self, type_name: str, own_fields: Iterable[str] = (), relationships: Optional[Mapping[str, "ResourceSchema"]] = None
    ) -> None:
        """
        :param type_name: resource type name, eg. "articles"
        :param own_fields: names of the fields that may be requested in a sparse fieldset
        :param relationships: relationship name => related schema
        """
        if not isinstance(type_name, str):
            raise TypeError("type_name must be a string")
        self.type_name = type_name
        self.own_fields = frozenset(own_fields)
        self._relationships: Dict[str, ResourceSchema] = {}
        for rel_name, rel_schema in (relationships or {}).items():
            self.relate(rel_name, rel_schema)

    def relate(self, rel_name: str, rel_schema: "ResourceSchema") -> "ResourceSchema":
        """
        Declare a relationship, this is used to close cycles after the schemas have been created
        :param rel_name: name of the relationship
        :param rel_schema: schema of the related resource
        :return: self
        """
        if not isinstance(rel_schema, ResourceSchema):
            raise TypeError(f"Relationship {rel_name!r} of {self.type_name!r} should be a ResourceSchema")
        self._relationships[rel_name] = rel_schema
        return self

    @property
    def relationships(self) -> Mapping[str, "ResourceSchema"]:
        return dict(self._relationships)

    def relationship(self, rel_name: str) -> Optional["ResourceSchema"]:
        """
        :param rel_name: name of the relationship
        :return: the related schema or None if there's no such relationship
        """
        return self._relationships.get(rel_name)

    def has_relationship(self, rel_name: str) -> bool:
        return rel_name in self._relationships

    def __repr__(self) -> str:
        # only the relationship names: the graph may be cyclic
        return f"<ResourceSchema {self.type_name} fields={sorted(self.own_fields)} relationships={sorted(self._relationships)}>"
