"""Protocols describing the collaborators the client depends on."""

from .transport import HTTPResponse, HTTPSession

__all__ = ["HTTPResponse", "HTTPSession"]
