"""A small DNS client: query building, wire encoding and response decoding."""

__version__ = "0.1.0"