"""Core domain types and logic."""

from .errors import ErrorCode, InitError
from .project import ManifestError, ProjectContext, load_manifest
from .release_config import ReleaseConfig
from .result import Err, Ok, Result

__all__ = [
    # errors
    "ErrorCode",
    "InitError",
    # project
    "ManifestError",
    "ProjectContext",
    "load_manifest",
    # release config
    "ReleaseConfig",
    # result
    "Err",
    "Ok",
    "Result",
]
