import re
from typing import Any
from bson import ObjectId

# Storage-generated identifiers: 24 hexadecimal characters
_REFERENCE_RE = re.compile(r"^[0-9a-fA-F]{24}$")


def is_opaque_reference(value: Any) -> bool:
  """True when a value is a storage identifier rather than a readable label"""
  if isinstance(value, ObjectId):
    return True
  if not isinstance(value, str):
    return False
  return bool(_REFERENCE_RE.match(value.strip()))
