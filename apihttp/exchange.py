from hashlib import md5
from urllib.parse import parse_qsl

from apihttp import __version__ as pkg_version
from apihttp._util import normalize_header_name, normalize_headers, to_text
from apihttp.cache_control import parse_cache_control
from apihttp.config import ApiConfig

CLIENT_IDENTIFIER_SUFFIX = "apihttp-python/" + pkg_version


class HttpExchange(object):
  """
  Stores a single request and, once it has been executed, its response.

  A transport reads the request fields, performs the call and fills in
  ``response_status_code``, the response headers and ``response_body``.
  """
  # pylint: disable=too-many-instance-attributes

  # pylint: disable=too-many-arguments
  def __init__(
      self, url, method="GET", headers=None, post_body=None,
      config=None, header_normalizer=normalize_header_name):
    """
    :param url: Full request URL, query string included.
    :param method: HTTP method. Stored upper-cased.
    :param headers: Request headers.
    :param post_body: Request body.
    :param config:
      :any:`ApiConfig` supplying the application name. Defaults to an empty config.
    :param header_normalizer:
      Function mapping a header name to its canonical form.
      Applied to stored headers and to lookup keys.
    """
    config = ApiConfig() if config is None else config
    self._header_normalizer = header_normalizer
    self._request_headers = {}
    self._response_headers = {}
    self._method = None

    self.url = url
    """Request URL, including the query string if any."""
    self.method = method
    self.set_request_headers(headers)
    self.post_body = post_body
    """Request body. May be None."""

    self.client_identifier = CLIENT_IDENTIFIER_SUFFIX
    """Sent as the ``User-Agent`` unless the request headers already carry one."""
    if config.application_name:
      self.client_identifier = "%s %s" % (config.application_name, CLIENT_IDENTIFIER_SUFFIX)

    self.access_key = None
    """Access key written by a signing step. Part of :any:`cache_key` when set."""

    self.response_status_code = None
    """HTTP status code. None until a response arrives."""
    self.response_body = None
    """Response body. None until a response arrives."""

    self.start_time = None
    """Time the request started."""
    self.end_time = None
    """Time the response was received."""

  @property
  def method(self):
    """Upper-case HTTP method."""
    return self._method

  @method.setter
  def method(self, method):
    self._method = method.upper()

  @property
  def request_headers(self):
    """Dict of normalized request headers."""
    return self._request_headers

  @property
  def response_headers(self):
    """Dict of normalized response headers."""
    return self._response_headers

  def set_request_headers(self, headers):
    """Normalizes ``headers`` and merges them over the stored request headers."""
    self._request_headers.update(normalize_headers(headers, self._header_normalizer))

  def set_response_headers(self, headers):
    """Normalizes ``headers`` and merges them over the stored response headers."""
    self._response_headers.update(normalize_headers(headers, self._header_normalizer))

  def get_request_header(self, key):
    """Value of the request header ``key``, or None if it is absent."""
    return self._request_headers.get(self._header_normalizer(key))

  def get_response_header(self, key):
    """Value of the response header ``key``, or None if it is absent."""
    return self._response_headers.get(self._header_normalizer(key))

  @property
  def base_url(self):
    """
    ``url`` without its query string.
    Used as the base string URI when signing requests.
    """
    return self.url.split("?", 1)[0]

  @property
  def query_params(self):
    """
    Dict of the parameters in the query string of ``url``.
    If a key repeats, its last value wins.
    """
    if "?" not in self.url:
      return {}
    return dict(parse_qsl(self.url.split("?", 1)[1], keep_blank_values=True))

  @property
  def cache_key(self):
    """
    md5 hex digest of ``url``, ``access_key`` and the ``authorization`` request header.
    Requests made with different credentials get different keys.
    """
    key = to_text(self.url)
    if self.access_key is not None:
      key += to_text(self.access_key)
    authorization = self.get_request_header("authorization")
    if authorization is not None:
      key += to_text(authorization)
    return md5(key.encode("utf-8"), usedforsecurity=False).hexdigest()

  @property
  def parsed_cache_control(self):
    """Dict of the directives in the ``cache-control`` response header."""
    return parse_cache_control(self.get_response_header("cache-control"))

  @property
  def time_taken(self):
    """``end_time - start_time``, or None before the exchange completes."""
    if self.start_time is None or self.end_time is None:
      return None
    return self.end_time - self.start_time

  def __repr__(self):
    return "HttpExchange(method=%s, url=%s, status=%s)" % (
      self.method, self.url, self.response_status_code)
