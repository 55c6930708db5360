from enum import Enum, IntEnum
from ..types import *


class HttpStatusCodes(IntEnum):
    """HttpStatusCodes.NOT_FOUND == 404"""
    CONTINUE = 100
    SWITCHING_PROTOCOLS = 101
    PROCESSING = 102
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NON_AUTHORITATIVE_INFORMATION = 203
    NO_CONTENT = 204
    RESET_CONTENT = 205
    PARTIAL_CONTENT = 206
    MULTI_STATUS = 207
    MULTIPLE_CHOICES = 300
    MOVED_PERMANENTLY = 301
    MOVED_TEMPORARILY = 302
    SEE_OTHER = 303
    NOT_MODIFIED = 304
    USE_PROXY = 305
    TEMPORARY_REDIRECT = 307
    PERMANENT_REDIRECT = 308
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    PAYMENT_REQUIRED = 402
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    NOT_ACCEPTABLE = 406
    PROXY_AUTHENTICATION_REQUIRED = 407
    REQUEST_TIMEOUT = 408
    CONFLICT = 409
    GONE = 410
    LENGTH_REQUIRED = 411
    PRECONDITION_FAILED = 412
    REQUEST_TOO_LONG = 413
    REQUEST_URI_TOO_LONG = 414
    UNSUPPORTED_MEDIA_TYPE = 415
    REQUESTED_RANGE_NOT_SATISFIABLE = 416
    EXPECTATION_FAILED = 417
    IM_A_TEAPOT = 418
    INSUFFICIENT_SPACE_ON_RESOURCE = 419
    METHOD_FAILURE = 420
    UNPROCESSABLE_ENTITY = 422
    LOCKED = 423
    FAILED_DEPENDENCY = 424
    PRECONDITION_REQUIRED = 428
    TOO_MANY_REQUESTS = 429
    REQUEST_HEADER_FIELDS_TOO_LARGE = 431
    UNAVAILABLE_FOR_LEGAL_REASONS = 451
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    HTTP_VERSION_NOT_SUPPORTED = 505
    INSUFFICIENT_STORAGE = 507
    NETWORK_AUTHENTICATION_REQUIRED = 511


class HttpStatusReasons(str, Enum):
    """HttpStatusReasons.NOT_FOUND == 'Not Found'"""
    CONTINUE = 'Continue'
    SWITCHING_PROTOCOLS = 'Switching Protocols'
    PROCESSING = 'Processing'
    OK = 'OK'
    CREATED = 'Created'
    ACCEPTED = 'Accepted'
    NON_AUTHORITATIVE_INFORMATION = 'Non Authoritative Information'
    NO_CONTENT = 'No Content'
    RESET_CONTENT = 'Reset Content'
    PARTIAL_CONTENT = 'Partial Content'
    MULTI_STATUS = 'Multi-Status'
    MULTIPLE_CHOICES = 'Multiple Choices'
    MOVED_PERMANENTLY = 'Moved Permanently'
    MOVED_TEMPORARILY = 'Moved Temporarily'
    SEE_OTHER = 'See Other'
    NOT_MODIFIED = 'Not Modified'
    USE_PROXY = 'Use Proxy'
    TEMPORARY_REDIRECT = 'Temporary Redirect'
    PERMANENT_REDIRECT = 'Permanent Redirect'
    BAD_REQUEST = 'Bad Request'
    UNAUTHORIZED = 'Unauthorized'
    PAYMENT_REQUIRED = 'Payment Required'
    FORBIDDEN = 'Forbidden'
    NOT_FOUND = 'Not Found'
    METHOD_NOT_ALLOWED = 'Method Not Allowed'
    NOT_ACCEPTABLE = 'Not Acceptable'
    PROXY_AUTHENTICATION_REQUIRED = 'Proxy Authentication Required'
    REQUEST_TIMEOUT = 'Request Timeout'
    CONFLICT = 'Conflict'
    GONE = 'Gone'
    LENGTH_REQUIRED = 'Length Required'
    PRECONDITION_FAILED = 'Precondition Failed'
    REQUEST_TOO_LONG = 'Request Entity Too Large'
    REQUEST_URI_TOO_LONG = 'Request-URI Too Long'
    UNSUPPORTED_MEDIA_TYPE = 'Unsupported Media Type'
    REQUESTED_RANGE_NOT_SATISFIABLE = 'Requested Range Not Satisfiable'
    EXPECTATION_FAILED = 'Expectation Failed'
    IM_A_TEAPOT = "I'm a teapot"
    INSUFFICIENT_SPACE_ON_RESOURCE = 'Insufficient Space on Resource'
    METHOD_FAILURE = 'Method Failure'
    UNPROCESSABLE_ENTITY = 'Unprocessable Entity'
    LOCKED = 'Locked'
    FAILED_DEPENDENCY = 'Failed Dependency'
    PRECONDITION_REQUIRED = 'Precondition Required'
    TOO_MANY_REQUESTS = 'Too Many Requests'
    REQUEST_HEADER_FIELDS_TOO_LARGE = 'Request Header Fields Too Large'
    UNAVAILABLE_FOR_LEGAL_REASONS = 'Unavailable For Legal Reasons'
    INTERNAL_SERVER_ERROR = 'Internal Server Error'
    NOT_IMPLEMENTED = 'Not Implemented'
    BAD_GATEWAY = 'Bad Gateway'
    SERVICE_UNAVAILABLE = 'Service Unavailable'
    GATEWAY_TIMEOUT = 'Gateway Timeout'
    HTTP_VERSION_NOT_SUPPORTED = 'HTTP Version Not Supported'
    INSUFFICIENT_STORAGE = 'Insufficient Storage'
    NETWORK_AUTHENTICATION_REQUIRED = 'Network Authentication Required'


# both enums share member names, which is what ties a code to its reason
code_to_reason: Dict[int, str] = {
    code.value: HttpStatusReasons[code.name].value for code in HttpStatusCodes
}
reason_to_code: Dict[str, int] = {reason: code for code, reason in code_to_reason.items()}
