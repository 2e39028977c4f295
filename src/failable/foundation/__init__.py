"""Foundation: error records, configuration and testing helpers.

Import testing helpers from failable.foundation.testing directly; they depend
on the monads package and are not re-exported here.
"""

from .config import FailableSettings, LoggingSettings, clear_settings_cache, get_settings
from .errors import ErrorInfo, FailableException, error_info, error_info_from_exc, error_message, validate_error_info

__all__ = [
    # Config
    "FailableSettings", "LoggingSettings", "clear_settings_cache", "get_settings",
    # Errors
    "ErrorInfo", "FailableException", "error_info", "error_info_from_exc", "error_message", "validate_error_info",
]
