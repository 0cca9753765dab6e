from json import dumps


def logger(logger_func):
  """
  Function that can be the ``observer`` for a :any:`HttpTransport`.
  Will call ``logger_func`` on a string representation of each :any:`HttpExchange`.

  Use it like::

    def log(logged):
      print(logged)
    transport = HttpTransport(observer=logger(log))
    transport.execute(transport.new_exchange("https://example.com/")) # Calls `log`

  :param logger_func: Callback taking a string to be logged.
  """
  return lambda exchange: logger_func(show_exchange(exchange))


def show_exchange(exchange):
  """Translates a :any:`HttpExchange` to a string suitable for logging."""
  ex = exchange
  parts = []
  log = parts.append

  def _indent(s):
    """Adds extra spaces to the beginning of every newline."""
    indent_str = "  "
    return ("\n" + indent_str).join(s.split("\n"))

  def _pretty(value):
    return dumps(value, sort_keys=True, indent=2, separators=(", ", ": "), default=str)

  log("%s %s\n" % (ex.method, ex.url))
  if ex.request_headers:
    log("  Request headers: %s\n" % _indent(_pretty(ex.request_headers)))
  if ex.post_body is not None:
    log("  Request body: %s\n" % _indent(_as_text(ex.post_body)))
  if ex.response_status_code is not None:
    log("  Response headers: %s\n" % _indent(_pretty(ex.response_headers)))
    log("  Response body: %s\n" % _indent(_as_text(ex.response_body)))
    if ex.time_taken is not None:
      log("  Response (%s): Network latency %ims\n" % (
        ex.response_status_code, int(ex.time_taken * 1000)))
    else:
      log("  Response (%s)\n" % ex.response_status_code)

  return u"".join(parts)


def _as_text(body):
  if body is None:
    return ""
  if isinstance(body, (bytes, bytearray)):
    return body.decode("utf-8", "replace")
  return str(body)
