"""
Hatena Blog Members

A Python client for managing the members of a Hatena Blog.
"""

from .client import HatenaBlogClient
from .exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    HatenaBlogError,
    TransportError,
)
from .models import BlogMember, Role

__version__ = "0.1.0"

__all__ = [
    "HatenaBlogClient",
    "BlogMember",
    "Role",
    "HatenaBlogError",
    "TransportError",
    "APIError",
    "DecodeError",
    "ConfigurationError",
]
