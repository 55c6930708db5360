from .codes import HttpStatusCodes, HttpStatusReasons, code_to_reason, reason_to_code
from .errors import HttpError, describe_error
from .helpers import (
    generate_cookie, parse_cookies, parse_query_string, generate_query_string,
    url_to_relative, encode_html, decode_html,
)
from .mime import get_mime_type, get_extension

__all__ = [
    'HttpStatusCodes', 'HttpStatusReasons', 'code_to_reason', 'reason_to_code',
    'HttpError', 'describe_error',
    'generate_cookie', 'parse_cookies', 'parse_query_string', 'generate_query_string',
    'url_to_relative', 'encode_html', 'decode_html',
    'get_mime_type', 'get_extension',
]
