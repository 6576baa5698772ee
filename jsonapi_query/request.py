"""
Extract the json:api query parameters from the request arguments

    ?fields[articles]=title,body&fields[people]=name&include=author&filter[title]=foo&sort=-created_at

is split into the raw parameter slots consumed by the QuerySpecBuilder:

    {
        "fields": {"articles": "title,body", "people": "name"},
        "include": "author",
        "filter": {"title": "foo"},
        "sort": "-created_at",
    }
"""
import re
from typing import Dict, Union
from werkzeug.datastructures import MultiDict

# fields[<type>] / filter[<field>]; a malformed key like filter[author][name] or a bare
# filter is kept as "author][name" / "" so the parser rejects it instead of dropping it
BRACKET_RE = re.compile(r"(fields|filter)(?:\[(.*)\])?", re.DOTALL)

RawQueryParams = Dict[str, Union[str, Dict[str, str]]]


def parse_query_args(args: MultiDict) -> RawQueryParams:
    """
    parse the jsonapi request arguments:
    - fields[]
    - include
    - filter[]
    - sort
    Other arguments (eg. page[limit]) are ignored
    :param args: request arguments
    :return: raw query parameters
    """
    result = {"fields": {}, "include": "", "filter": {}, "sort": ""}

    # multi=True: when a filter[] is given more than once, the last value wins
    for arg, val in args.items(multi=True):
        bracket_attr = BRACKET_RE.fullmatch(arg)
        if bracket_attr:
            param_type, key = bracket_attr.groups()
            result[param_type][key or ""] = val
            continue

        if arg in ("include", "sort"):
            result[arg] = val

    return result
