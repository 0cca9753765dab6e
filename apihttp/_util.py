def to_text(value):
  """Decodes bytes as UTF-8, replacing bad sequences. Anything else goes through ``str``."""
  if isinstance(value, (bytes, bytearray)):
    return value.decode("utf-8", "replace")
  return str(value)


def normalize_header_name(name):
  """Canonical form of a header name: stripped and lower-cased."""
  return to_text(name).strip().lower()


def normalize_headers(headers, normalizer=normalize_header_name):
  """
  Copies ``headers`` into a plain dict, passing every key through ``normalizer``.
  Values are left untouched. ``None`` is treated as no headers.
  """
  out = {}
  if not headers:
    return out
  for key in headers:
    out[normalizer(key)] = headers[key]
  return out
