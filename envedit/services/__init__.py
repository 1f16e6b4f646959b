"""Concrete services: parsing, rendering, storage and the env document."""

from .env_document import EnvDocument, load, parse, read
from .file_service import FileService
from .parser import parse_line, parse_lines
from .serializer import render_line, render_lines

__all__ = [
    "EnvDocument",
    "FileService",
    "load",
    "parse",
    "parse_line",
    "parse_lines",
    "read",
    "render_line",
    "render_lines",
]
