from __future__ import annotations
from ..types import *
from .codes import code_to_reason, HttpStatusCodes


class HttpError(Exception):
    """
    exception carrying an http status code.

    HttpError(404).message == 'Not Found'
    HttpError(404, 'user not found').public_message == 'user not found'
    HttpError(500, 'missing configuration').public_message == 'Internal Server Error'

    `expose` defaults to status < 500. when it is false the caller-facing
    `public_message` falls back to the standard reason phrase so internal
    messages never leak.
    """

    def __init__(self, status: int, message: Optional[str] = None, *,
                 expose: Optional[bool] = None):
        self.status = status
        self.message = message
        self.expose = expose
        if isinstance(status, bool) or not isinstance(status, (int, float)) or status not in code_to_reason:
            raise ValueError("Incorrect status code")

        status = int(status)
        default_message = code_to_reason[status]
        private_message = message if message is not None else default_message
        super().__init__(private_message)

        self.status: int = status
        self.message: str = private_message
        self.expose: bool = expose if expose is not None else status < 500
        self.public_message: str = private_message if self.expose else default_message

    def __repr__(self) -> str:
        return f"HttpError({self.status}, {self.message!r}, expose={self.expose})"


def describe_error(err: BaseException) -> Dict[str, Any]:
    """
    map any exception to {status, message, error} for an error response.
    anything that carries an integer `status` keeps it, everything else is a 500.
    """
    status = getattr(err, 'status', None)
    if not isinstance(status, int) or isinstance(status, bool):
        status = HttpStatusCodes.INTERNAL_SERVER_ERROR.value
    message = err.message if isinstance(err, HttpError) else str(err)
    return {'status': int(status), 'message': message, 'error': err}
