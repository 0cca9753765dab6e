"""
Tokenizer for ``Cache-Control`` header values.

A value is a comma separated list of directives, each either ``name`` or
``name=value``, where ``value`` is a token or a quoted string
(`RFC 9111 section 5.2 <https://www.rfc-editor.org/rfc/rfc9111#section-5.2>`__).
"""

_WHITESPACE = " \t"


def parse_cache_control(value):
  """
  Parses a ``Cache-Control`` header value into a dict of directive name to value.

  Names are lower-cased. Directives without an argument map to ``True``.
  Quoted arguments are unquoted, so ``private="a, b"`` maps ``private`` to ``"a, b"``.
  A repeated directive keeps its last value.

  :param value:
    Raw header value. Bytes are decoded as latin-1.
    ``None``, ``""`` or any other non-string value give an empty dict.
  """
  directives = {}
  if isinstance(value, (bytes, bytearray)):
    value = value.decode("latin-1")
  if not value or not isinstance(value, str):
    return directives
  for name, argument in _directives(value):
    directives[name] = argument
  return directives


def _directives(value):
  """Yields ``(name, argument)`` pairs, skipping empty list elements."""
  pos = 0
  end = len(value)
  while pos < end:
    start = pos
    while pos < end and value[pos] not in ",=":
      pos += 1
    name = value[start:pos].strip().lower()
    argument = True

    if pos < end and value[pos] == "=":
      pos += 1
      while pos < end and value[pos] in _WHITESPACE:
        pos += 1
      if pos < end and value[pos] == '"':
        argument, pos = _quoted_string(value, pos + 1)
        # Anything between the closing quote and the next comma is garbage.
        while pos < end and value[pos] != ",":
          pos += 1
      else:
        start = pos
        while pos < end and value[pos] != ",":
          pos += 1
        argument = value[start:pos].strip()

    # Step over the comma.
    pos += 1
    if name:
      yield name, argument


def _quoted_string(value, pos):
  """
  Reads a quoted string whose opening quote sits just before ``pos``.
  Returns the unescaped text and the position after the closing quote.
  An unterminated string runs to the end of ``value``.
  """
  chars = []
  end = len(value)
  while pos < end:
    char = value[pos]
    if char == "\\" and pos + 1 < end:
      chars.append(value[pos + 1])
      pos += 2
    elif char == '"':
      return "".join(chars), pos + 1
    else:
      chars.append(char)
      pos += 1
  return "".join(chars), pos
