"""Error types raised by the apihttp transport."""
from requests import codes


class ApiError(Exception):
  """Base class for errors raised while executing an :any:`HttpExchange`."""

  def __init__(self, description, exchange):
    super(ApiError, self).__init__(description)
    self.exchange = exchange
    """:any:`HttpExchange` for the request that caused this error."""


class HttpIOError(ApiError):
  """The request could not be sent or the response could not be read."""
  pass


class HttpStatusError(ApiError):
  """The server answered with a non-2xx status code."""

  @staticmethod
  def raise_for_status_code(exchange):
    code = exchange.response_status_code
    # pylint: disable=no-member
    if code is not None and 200 <= code <= 299:
      pass
    elif code == codes.bad_request:
      raise BadRequest(exchange)
    elif code == codes.unauthorized:
      raise Unauthorized(exchange)
    elif code == codes.forbidden:
      raise PermissionDenied(exchange)
    elif code == codes.not_found:
      raise NotFound(exchange)
    elif code == codes.internal_server_error:
      raise InternalError(exchange)
    elif code == codes.unavailable:
      raise UnavailableError(exchange)
    else:
      raise HttpStatusError(exchange)

  def __init__(self, exchange):
    super(HttpStatusError, self).__init__(
      "%s %s returned status %s" % (exchange.method, exchange.url, exchange.response_status_code),
      exchange)
    self.status_code = exchange.response_status_code
    """HTTP status code of the response."""


class BadRequest(HttpStatusError):
  """HTTP 400 error."""
  pass


class Unauthorized(HttpStatusError):
  """HTTP 401 error."""
  pass


class PermissionDenied(HttpStatusError):
  """HTTP 403 error."""
  pass


class NotFound(HttpStatusError):
  """HTTP 404 error."""
  pass


class InternalError(HttpStatusError):
  """HTTP 500 error."""
  pass


class UnavailableError(HttpStatusError):
  """HTTP 503 error."""
  pass
