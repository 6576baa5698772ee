__version__ = "0.1.0"
__description__ = "jsonapi_query : JSON:API query string parsing and validation for Flask"
