from .http_response import api_response
from .validators import to_decimal, to_id_string

__all__ = ["api_response", "to_decimal", "to_id_string"]
