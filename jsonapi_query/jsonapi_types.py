from typing import TypedDict


class JSONAPIErrorSource(TypedDict, total=False):
    parameter: str


class JSONAPIErrorObject(TypedDict, total=False):
    status: str
    title: str
    detail: str
    source: JSONAPIErrorSource


class JSONAPIErrorDocument(TypedDict, total=False):
    errors: list[JSONAPIErrorObject]
    jsonapi: dict[str, str]
