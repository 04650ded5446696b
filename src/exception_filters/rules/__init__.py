"""Pure classification rules mapping tagged failures to normalized errors."""

from .data_access import translate_data_access_failure
from .schema_validation import translate_schema_validation_failure
from .transport import translate_transport_failure

__all__ = [
    "translate_data_access_failure",
    "translate_schema_validation_failure",
    "translate_transport_failure",
]
