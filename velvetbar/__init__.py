"""A JSON web service and library for a bar's menu of drinks and foods."""

__version__ = "0.1.0"