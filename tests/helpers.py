from collections import namedtuple
from logging import getLogger, WARNING
from unittest import TestCase

from requests import codes
from requests.structures import CaseInsensitiveDict

from apihttp.transport import HttpTransport


class ApiHttpTestCase(TestCase):
  @classmethod
  def setUpClass(cls):
    super(ApiHttpTestCase, cls).setUpClass()

    # Turn off annoying logging about reset connections.
    getLogger("requests").setLevel(WARNING)

  def assert_raises(self, exception_class, action):
    """Like self.assertRaises and returns the exception too."""
    with self.assertRaises(exception_class) as cm:
      action()
    return cm.exception


def mock_transport(response_text, status_code=codes.ok, headers=None, **kwargs):
  return HttpTransport(session=_MockSession(response_text, status_code, headers), **kwargs)


class _MockSession(object):
  def __init__(self, response_text, status_code, headers=None):
    self.response_text = response_text
    self.status_code = status_code
    self.headers = CaseInsensitiveDict(headers or {})
    self.sent = []
    self.closed = False

  def close(self):
    self.closed = True

  def prepare_request(self, request):
    return request.prepare()

  def send(self, prepared, **kwargs):
    # pylint: disable=unused-argument
    self.sent.append(prepared)
    return _MockResponse(self.status_code, self.response_text, self.headers)


class _FailingSession(_MockSession):
  def __init__(self, error):
    super(_FailingSession, self).__init__("", codes.ok)
    self.error = error

  def send(self, prepared, **kwargs):
    raise self.error


_MockResponse = namedtuple('MockResponse', ['status_code', 'text', 'headers'])
