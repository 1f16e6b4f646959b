"""Domain layer: line model, status values, errors and interfaces."""

from .errors import ParseError
from .interfaces import IAppConfig, IConfigService, IFileService
from .models import Blank, Change, ChangeKind, Comment, Line, Pair

__all__ = [
    "Blank",
    "Change",
    "ChangeKind",
    "Comment",
    "IAppConfig",
    "IConfigService",
    "IFileService",
    "Line",
    "Pair",
    "ParseError",
]
