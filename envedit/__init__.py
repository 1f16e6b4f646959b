"""Format-preserving editor for KEY=VALUE (dotenv) files."""

from envedit.domain import Blank, Change, ChangeKind, Comment, Line, Pair, ParseError
from envedit.services.env_document import EnvDocument, load, parse, read

__all__ = [
    "Blank",
    "Change",
    "ChangeKind",
    "Comment",
    "EnvDocument",
    "Line",
    "Pair",
    "ParseError",
    "load",
    "parse",
    "read",
]
