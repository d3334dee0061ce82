"""Core domain types and logic."""

from .config import Config, ConfigError, load_config, load_config_or_default
from .errors import ErrorCode
from .filters import FilterCriteria, FilterError, LabelSets, build_label_sets
from .links import LinkError, extract_project_path
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "load_config",
    "load_config_or_default",
    # errors
    "ErrorCode",
    # filters
    "FilterCriteria",
    "FilterError",
    "LabelSets",
    "build_label_sets",
    # links
    "LinkError",
    "extract_project_path",
    # result
    "Err",
    "Ok",
    "Result",
]
