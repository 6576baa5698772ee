"""
Parse and validate the json:api query parameters:
    * sort: https://jsonapi.org/format/#fetching-sorting
    * filter: https://jsonapi.org/recommendations/#filtering
    * fields: https://jsonapi.org/format/#fetching-sparse-fieldsets
    * include: https://jsonapi.org/format/#fetching-includes

Every parse_* function takes the current QuerySpec and returns an updated copy,
or raises InvalidQuery when a parameter isn't allowed by the resource schema.
QuerySpecBuilder chains them:

    builder = QuerySpecBuilder(sort=["created_at", "title"], filter=["title"])
    result = builder.parse({"sort": "-created_at", "include": "comments.author"}, articles_schema)
    if result.ok:
        spec = result.spec

The parser doesn't log and doesn't try to correct invalid input.
"""
import re
from typing import Iterable, Mapping, NamedTuple, Optional
from .errors import InvalidQuery, SORT, FILTER, FIELDS, INCLUDE
from .include_tree import IncludeTree
from .query_spec import QuerySpec, SortDirection, SortField
from .schema import ResourceSchema

# optional "-" prefix for descending sort, followed by the field name
SORT_RE = re.compile(r"(-?)(.*)", re.DOTALL)


def parse_sort(spec: QuerySpec, sort_csv: str, allowed_fields: Iterable[str]) -> QuerySpec:
    """
    Parse the sort query parameter, eg. "-created_at,title"
    :param spec: current QuerySpec
    :param sort_csv: csv list of (optionally "-"-prefixed) field names
    :param allowed_fields: the fields that can be sorted on
    :return: QuerySpec with the sort fields in request order
    """
    if not sort_csv:
        return spec

    allowed_fields = set(allowed_fields)
    sort = []
    for token in sort_csv.split(","):
        direction, field_name = SORT_RE.fullmatch(token).groups()
        if field_name not in allowed_fields:
            raise InvalidQuery(resource=spec.root_schema.type_name, param=field_name, param_type=SORT)
        sort.append(SortField(field_name, SortDirection.DESC if direction == "-" else SortDirection.ASC))

    return spec.update(sort=tuple(sort))


def parse_filter(spec: QuerySpec, filters: Mapping[str, str], allowed_fields: Iterable[str]) -> QuerySpec:
    """
    Parse the filter[] query parameters, eg. {"title": "my title"}
    The values are kept as raw strings, it's up to the caller to interpret them
    :param spec: current QuerySpec
    :param filters: field name => filter value
    :param allowed_fields: the fields that can be filtered on
    :return: QuerySpec with the filters added
    """
    if not filters:
        return spec

    allowed_fields = set(allowed_fields)
    result = dict(spec.filter)
    for key, val in filters.items():
        if key not in allowed_fields:
            raise InvalidQuery(resource=spec.root_schema.type_name, param=key, param_type=FILTER)
        result[key] = val

    return spec.update(filter=result)


def get_fields_schema(root_schema: ResourceSchema, type_name: str) -> ResourceSchema:
    """
    :param root_schema: schema of the requested resource
    :param type_name: the type in a fields[type] parameter: the root type or one of its relationship names
    :return: the schema the fields of `type_name` should be validated against
    """
    if type_name == root_schema.type_name:
        return root_schema
    if not root_schema.has_relationship(type_name):
        raise InvalidQuery(resource=root_schema.type_name, param=type_name, param_type=FIELDS)
    return root_schema.relationship(type_name)


def parse_fields(spec: QuerySpec, fields: Mapping[str, str], root_schema: ResourceSchema) -> QuerySpec:
    """
    Parse the sparse fieldset parameters, eg. {"articles": "title,body", "author": "name"}
    All invalid fields of a type are reported at once, joined by ","
    :param spec: current QuerySpec
    :param fields: type name => csv list of fields
    :param root_schema: schema of the requested resource
    :return: QuerySpec with the requested fields per type
    """
    if not fields:
        return spec

    result = dict(spec.fields)
    for type_name, fields_csv in fields.items():
        valid_fields = get_fields_schema(root_schema, type_name).own_fields
        requested_fields = frozenset(fields_csv.split(","))
        bad_fields = requested_fields - valid_fields
        if bad_fields:
            raise InvalidQuery(resource=root_schema.type_name, param=",".join(sorted(bad_fields)), param_type=FIELDS)
        result[type_name] = requested_fields

    return spec.update(fields=result)


def is_valid_include(path: Iterable[str], root_schema: ResourceSchema) -> bool:
    """
    Walk the relationship graph along `path`
    The walk is bounded by the length of the path, so cyclic schemas are fine
    :param path: relationship names, eg. ["comments", "author"]
    :param root_schema: schema to start from
    :return: True if every relationship in the path exists
    """
    current = root_schema
    for rel_name in path:
        current = current.relationship(rel_name)
        if current is None:
            return False
    return True


def parse_include(spec: QuerySpec, include_csv: str, root_schema: ResourceSchema) -> QuerySpec:
    """
    Parse the include parameter, eg. "comments,comments.author,tags"
    The relationship paths are merged into an IncludeTree: {comments: {author: {}}, tags: {}}
    :param spec: current QuerySpec
    :param include_csv: csv list of (dotted) relationship paths
    :param root_schema: schema of the requested resource
    :return: QuerySpec with the includes merged into its include tree
    """
    if not include_csv:
        return spec

    includes = spec.includes
    for inc in include_csv.split(","):
        # "a.b" => ["a", "b"], an empty segment is never a valid relationship
        path = inc.split(".")
        if not is_valid_include(path, root_schema):
            raise InvalidQuery(resource=root_schema.type_name, param=inc, param_type=INCLUDE)
        if len(path) == 1:
            includes = includes.merge(IncludeTree.leaf(inc))
        else:
            includes = includes.merge(IncludeTree.from_path(path))

    return spec.update(includes=includes)


class QueryResult(NamedTuple):
    """
    Outcome of QuerySpecBuilder.parse: either a spec or an error
    """

    spec: Optional[QuerySpec] = None
    error: Optional[InvalidQuery] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class QuerySpecBuilder:
    """
    Build a QuerySpec from the raw query parameters:
        {
            "fields": {"articles": "title"},
            "include": "comments.author",
            "filter": {"title": "my title"},
            "sort": "-created_at"
        }
    The sort and filter allow-lists are builder options, the fields and includes are
    validated against the resource schema.
    """

    # fixed order, this determines which error is reported when several parameters are invalid
    stages = (FIELDS, INCLUDE, FILTER, SORT)

    def __init__(self, sort: Iterable[str] = (), filter: Iterable[str] = ()) -> None:
        """
        :param sort: fields that can be sorted on
        :param filter: fields that can be filtered on
        """
        self.sort = frozenset(sort)
        self.filter = frozenset(filter)

    def parse_stage(self, stage: str, spec: QuerySpec, raw_params: Mapping, root_schema: ResourceSchema) -> QuerySpec:
        if stage == FIELDS:
            return parse_fields(spec, raw_params.get(FIELDS) or {}, root_schema)
        if stage == INCLUDE:
            return parse_include(spec, raw_params.get(INCLUDE) or "", root_schema)
        if stage == FILTER:
            return parse_filter(spec, raw_params.get(FILTER) or {}, self.filter)
        return parse_sort(spec, raw_params.get(SORT) or "", self.sort)

    def parse(self, raw_params: Mapping, root_schema: ResourceSchema) -> QueryResult:
        """
        Run the stages in order and stop at the first invalid parameter
        :param raw_params: dict with "fields", "include", "filter" and "sort" keys, missing keys are empty
        :param root_schema: schema of the requested resource
        :return: QueryResult
        """
        spec = QuerySpec.initial(root_schema)
        for stage in self.stages:
            try:
                spec = self.parse_stage(stage, spec, raw_params, root_schema)
            except InvalidQuery as exc:
                return QueryResult(error=exc)
        return QueryResult(spec=spec)

    def build(self, raw_params: Mapping, root_schema: ResourceSchema) -> QuerySpec:
        """
        :param raw_params: dict with "fields", "include", "filter" and "sort" keys
        :param root_schema: schema of the requested resource
        :return: the validated QuerySpec
        :raises InvalidQuery: for the first invalid parameter
        """
        result = self.parse(raw_params, root_schema)
        if not result.ok:
            raise result.error
        return result.spec
