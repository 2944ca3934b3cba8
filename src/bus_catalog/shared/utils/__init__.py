from .http_response import api_response as api_response
from .validators import to_decimal_text as to_decimal_text
