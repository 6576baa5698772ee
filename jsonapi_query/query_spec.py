"""
QuerySpec: the validated, structured representation of the json:api query parameters

    QuerySpec(
        root_schema=<ResourceSchema articles>,
        sort=(SortField("created_at", SortDirection.DESC),),
        filter={"title": "my title"},
        fields={"articles": frozenset({"title"}), "author": frozenset({"name"})},
        includes=IncludeTree({"comments": {"author": {}}}),
    )

A spec is created once per request and is read-only afterwards.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, NamedTuple, Tuple, Union
from .include_tree import IncludeTree
from .schema import ResourceSchema


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SortField(NamedTuple):
    field: str
    direction: SortDirection = SortDirection.ASC

    def __str__(self) -> str:
        prefix = "-" if self.direction == SortDirection.DESC else ""
        return f"{prefix}{self.field}"


def _readonly(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class QuerySpec:
    root_schema: ResourceSchema
    sort: Tuple[SortField, ...] = ()
    filter: Mapping[str, str] = field(default_factory=dict)
    fields: Mapping[str, FrozenSet[str]] = field(default_factory=dict)
    includes: IncludeTree = field(default_factory=IncludeTree)

    # the filter and fields mappings are read-only proxies, they can't be hashed
    __hash__ = None

    def __post_init__(self) -> None:
        # frozen: use object.__setattr__ to normalize the containers
        sort = tuple(SortField(name, SortDirection(direction)) for name, direction in self.sort)
        object.__setattr__(self, "sort", sort)
        object.__setattr__(self, "filter", _readonly(self.filter))
        object.__setattr__(self, "fields", _readonly({type_name: frozenset(names) for type_name, names in self.fields.items()}))
        if not isinstance(self.includes, IncludeTree):
            object.__setattr__(self, "includes", IncludeTree(self.includes))

    @classmethod
    def initial(cls, root_schema: ResourceSchema) -> "QuerySpec":
        """
        :param root_schema: schema of the requested resource
        :return: empty spec, as if no query parameters were given
        """
        return cls(root_schema=root_schema)

    def update(self, **changes) -> "QuerySpec":
        """
        :return: a copy of the spec with `changes` applied
        """
        return replace(self, **changes)

    def to_query_params(self) -> Dict[str, Union[str, Dict[str, str]]]:
        """
        Render the spec as raw query parameters (the inverse of QuerySpecBuilder.build)
        :return: dict with "fields", "include", "filter" and "sort" keys
        """
        return {
            "fields": {type_name: _csv(sorted(names)) for type_name, names in self.fields.items()},
            "include": _csv(self.includes.paths()),
            "filter": dict(self.filter),
            "sort": _csv(str(sort_field) for sort_field in self.sort),
        }


def _csv(values: Iterable[str]) -> str:
    return ",".join(values)
