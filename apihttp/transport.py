from logging import getLogger
from time import time

from requests import Request, RequestException, Session
from requests.adapters import HTTPAdapter

from apihttp.config import ApiConfig
from apihttp.errors import HttpIOError
from apihttp.exchange import HttpExchange
from apihttp.exchange_logger import show_exchange


class HttpTransport(object):
  """
  Executes :any:`HttpExchange` objects over a pooled ``requests.Session``.

  Non-2xx responses are not errors here; the status code is stored on the exchange.
  Use :any:`HttpStatusError.raise_for_status_code` to turn them into exceptions.
  """

  # pylint: disable=too-many-arguments
  def __init__(
      self,
      config=None,
      timeout=60,
      observer=None,
      pool_connections=10,
      pool_maxsize=10,
      session=None):
    """
    :param config:
      :any:`ApiConfig` given to every exchange built by :any:`new_exchange`.
    :param timeout:
      Seconds after which a request is considered failed.
    :param observer:
      Callback that will be passed the :any:`HttpExchange` after every completed request.
    :param pool_connections:
      The number of connection pools to cache.
    :param pool_maxsize:
      The maximum number of connections to save in the pool.
    :param session:
      Existing ``requests.Session`` to send requests through.
    """
    self.config = ApiConfig() if config is None else config
    self.timeout = timeout
    self.observer = observer
    self.logger = getLogger(__name__) if self.config.debug else None

    if session is None:
      session = Session()
      session.mount('https://', HTTPAdapter(pool_connections=pool_connections,
                                            pool_maxsize=pool_maxsize))
      session.mount('http://', HTTPAdapter(pool_connections=pool_connections,
                                           pool_maxsize=pool_maxsize))
    self.session = session

  def __enter__(self):
    return self

  def __exit__(self, exc_type, exc_value, traceback):
    self.close()

  def close(self):
    self.session.close()

  def new_exchange(self, url, method="GET", headers=None, post_body=None):
    """Creates an :any:`HttpExchange` that uses this transport's config."""
    return HttpExchange(url, method, headers, post_body, config=self.config)

  def execute(self, exchange):
    """
    Sends ``exchange`` and fills in its response fields.

    :return: The same exchange.
    :raises HttpIOError: If the request could not be completed.
    """
    exchange.start_time = time()
    try:
      response = self._perform_request(exchange)
    except RequestException as e:
      exchange.end_time = time()
      raise HttpIOError("%s %s failed: %s" % (exchange.method, exchange.url, e), exchange) from e
    exchange.end_time = time()

    exchange.response_status_code = response.status_code
    exchange.set_response_headers(response.headers)
    exchange.response_body = response.text

    if self.logger is not None:
      self._log(show_exchange(exchange))
    if self.observer is not None:
      self.observer(exchange)
    return exchange

  def _perform_request(self, exchange):
    """Performs an HTTP action."""
    headers = dict(exchange.request_headers)
    if exchange.get_request_header("user-agent") is None:
      headers["User-Agent"] = exchange.client_identifier
    req = Request(exchange.method, exchange.url, headers=headers, data=exchange.post_body)
    return self.session.send(self.session.prepare_request(req), timeout=self.timeout)

  def _log(self, logged):
    for line in logged.rstrip("\n").split("\n"):
      self.logger.debug(line)
