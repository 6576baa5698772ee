# Configuration settings should be set in app.config
# The JsonapiQuery class attributes hold the defaults, they can be overridden with
# app.config, the JsonapiQuery(app, **kwargs) arguments or environment variables
import os
from flask import current_app
import jsonapi_query
from typing import Optional, Union


def get_config(option: str) -> Optional[Union[int, str]]:
    """Retrieve a configuration parameter from the app
    :param option: configuration parameter
    :return: configuration value
    """
    try:
        result = current_app.config[option]
    except (KeyError, RuntimeError):
        # not set or outside of the application context
        result = getattr(jsonapi_query.JsonapiQuery, option, os.environ.get(option, None))
    return result
