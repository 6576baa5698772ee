import logging
import os
import sys
from functools import wraps
from typing import Callable, Iterable
from flask import Flask, g, jsonify, make_response, request
import flask.app
from .config import get_config
from .errors import JsonapiError
from .jsonapi_types import JSONAPIErrorDocument
from .query_parser import QuerySpecBuilder
from .request import parse_query_args
from .schema import ResourceSchema


class JsonapiQuery:
    """This class configures the Flask application to report invalid json:api queries
    :param app: a Flask application.
    :param LOGLEVEL: loglevel configuration variable, values from logging module (0: trace, .. 50: critical)
    """

    # Configuration settings are stored as class variables
    LOGLEVEL = None
    QUERY_ATTR = "jsonapi_query"  # name of the flask.g attribute holding the QuerySpec
    INVALID_QUERY_FMT = "invalid {param_type}, {param} for type {resource}"
    JSONAPI_CONTENT_TYPE = "application/vnd.api+json"

    def __init__(self, app: flask.app.Flask = None, **kwargs) -> None:
        """
        Constructor
        """
        self.app = app
        if app is not None:
            self.init_app(app, **kwargs)

    def init_app(self, app: flask.app.Flask, **kwargs) -> None:
        """
        Register the error handler and apply the configuration
        """
        if not isinstance(app, Flask):  # pragma: no cover
            raise TypeError("'app' should be Flask.")

        for conf_name, conf_val in kwargs.items():
            setattr(JsonapiQuery, conf_name, conf_val)

        if app.config.get("DEBUG", False):
            log.setLevel(logging.DEBUG)
        loglevel = app.config.get("LOGLEVEL", get_config("LOGLEVEL"))
        if loglevel is not None:
            log.setLevel(int(loglevel))

        app.register_error_handler(JsonapiError, self.handle_error)
        app.extensions["jsonapi_query"] = self

    @staticmethod
    def handle_error(exc: JsonapiError):
        """
        Format the exception as a json:api error document
        """
        log.warning("%s: %s", type(exc).__name__, exc.message)
        errors: JSONAPIErrorDocument = {"errors": [exc.to_dict()], "jsonapi": {"version": "1.0"}}
        response = make_response(jsonify(errors), exc.status_code)
        response.content_type = get_config("JSONAPI_CONTENT_TYPE")
        return response

    @staticmethod
    def init_logging(loglevel: int = logging.WARNING) -> logging.Logger:
        """
        Specify the log format used in the webserver logs
        """
        log = logging.getLogger(__name__)
        if log.level == logging.NOTSET:
            handler = logging.StreamHandler(sys.stderr)
            formatter = logging.Formatter("[%(asctime)s] %(levelname)s: %(message)s")
            handler.setFormatter(formatter)
            log.setLevel(loglevel)
            log.addHandler(handler)
        return log


def jsonapi_query(schema: ResourceSchema, sort: Iterable[str] = (), filter: Iterable[str] = ()) -> Callable:
    """View decorator: parse the request query parameters into a QuerySpec
    The spec is stored in `flask.g`, under the QUERY_ATTR name (default: g.jsonapi_query)

        @app.route("/articles")
        @jsonapi_query(articles_schema, sort=["created_at", "title"], filter=["title"])
        def get_articles():
            spec = g.jsonapi_query

    :param schema: schema of the resource served by the view
    :param sort: fields that can be sorted on
    :param filter: fields that can be filtered on
    :raises InvalidQuery: when the query parameters are invalid
    """
    builder = QuerySpecBuilder(sort=sort, filter=filter)

    def decorator(fun: Callable) -> Callable:
        @wraps(fun)
        def view_wrapper(*args, **kwargs):
            raw_params = parse_query_args(request.args)
            spec = builder.build(raw_params, schema)
            log.debug(f"{request.path}: {spec}")
            setattr(g, get_config("QUERY_ATTR"), spec)
            return fun(*args, **kwargs)

        return view_wrapper

    return decorator


#
# logging initialization
#
try:
    DEBUG = os.getenv("DEBUG", logging.WARNING)
    LOGLEVEL = int(DEBUG)
except ValueError:  # pragma: no cover
    print(f'Invalid LogLevel in DEBUG Environment Variable! "{DEBUG}"')
    LOGLEVEL = logging.INFO

log = JsonapiQuery.init_logging(LOGLEVEL)
