from os import environ as _environ

APPLICATION_NAME_VAR = "APIHTTP_APPLICATION_NAME"
DEBUG_VAR = "APIHTTP_DEBUG"


class ApiConfig(object):
  """Settings shared by every exchange a client creates."""

  @staticmethod
  def from_environ(environ=None):
    """
    Reads ``APIHTTP_APPLICATION_NAME`` and ``APIHTTP_DEBUG``.

    :param environ: Mapping to read from. Defaults to ``os.environ``.
    """
    environ = _environ if environ is None else environ
    return ApiConfig(
      application_name=environ.get(APPLICATION_NAME_VAR),
      debug=bool(environ.get(DEBUG_VAR)))

  def __init__(self, application_name=None, debug=False):
    self.application_name = application_name or None
    """Name of the calling application, prefixed to the client identifier. May be None."""
    self.debug = debug
    """If true, transports log every exchange at DEBUG level."""

  def __repr__(self):
    return "ApiConfig(application_name=%r, debug=%r)" % (self.application_name, self.debug)

  def __eq__(self, other):
    return isinstance(other, ApiConfig) and \
      self.application_name == other.application_name and \
      self.debug == other.debug

  def __ne__(self, other):
    # pylint: disable=unneeded-not
    return not self == other
