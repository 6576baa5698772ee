# Exceptions
#
# InvalidQuery is raised by the query parser when a sort, filter, fields or include
# query parameter doesn't match the resource schema.
# The JsonapiQuery flask extension formats it as a json:api error document, for example:
# {
#     "errors": [
#         {
#             "status": "400",
#             "title": "Invalid Query",
#             "detail": "invalid sort, bogus for type articles",
#             "source": {"parameter": "sort"}
#         }
#     ],
#     "jsonapi": {"version": "1.0"}
# }
#
from http import HTTPStatus
from .config import get_config
from .jsonapi_types import JSONAPIErrorObject

# param_type values
SORT = "sort"
FILTER = "filter"
FIELDS = "fields"
INCLUDE = "include"

PARAM_TYPES = (SORT, FILTER, FIELDS, INCLUDE)


class JsonapiError(Exception):
    """
    Base class for the errors that are returned to the client
    """

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR.value
    title = "Error"
    message = ""

    def to_dict(self) -> JSONAPIErrorObject:
        """
        :return: json:api error object
        """
        return JSONAPIErrorObject(status=str(self.status_code), title=self.title, detail=self.message)


class InvalidQuery(JsonapiError):
    """
    This exception is raised when a query parameter is invalid for a resource.
    Always send back the message to the client in the response
    """

    status_code = HTTPStatus.BAD_REQUEST.value
    title = "Invalid Query"

    def __init__(self, resource: str, param: str, param_type: str) -> None:
        """
        :param resource: type name of the resource the query was validated against
        :param param: the offending value (field, type, relationship path or csv of fields)
        :param param_type: one of sort, filter, fields, include
        """
        if param_type not in PARAM_TYPES:
            raise ValueError(f"Invalid param_type {param_type!r}")
        self.resource = resource
        self.param = param
        self.param_type = param_type
        msg_fmt = get_config("INVALID_QUERY_FMT")
        self.message = msg_fmt.format(resource=resource, param=param, param_type=param_type)
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"InvalidQuery(resource={self.resource!r}, param={self.param!r}, param_type={self.param_type!r})"

    @property
    def source_parameter(self) -> str:
        """
        :return: the query string parameter that caused the error, eg. filter[title]
        """
        if self.param_type == FILTER:
            return f"filter[{self.param}]"
        if self.param_type == FIELDS:
            return "fields"
        return self.param_type

    def to_dict(self) -> JSONAPIErrorObject:
        result = super().to_dict()
        result["source"] = {"parameter": self.source_parameter}
        return result
