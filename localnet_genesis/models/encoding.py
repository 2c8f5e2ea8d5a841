"""JSON encoding matching the byte output of the node software's encoder."""

import json
from typing import Any, Optional


# Characters the node software escapes inside JSON strings; non-ASCII is emitted as UTF-8
_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def dumps(data: Any, indent: Optional[int] = None) -> bytes:
    """
    Serialize with sorted keys, compact when indent is None.

    These characters can only occur inside strings, so replacing them in
    the encoded text never touches JSON structure.
    """
    if indent is None:
        text = json.dumps(data, sort_keys=True, separators=(',', ':'), ensure_ascii=False)
    else:
        text = json.dumps(data, sort_keys=True, indent=indent, ensure_ascii=False)
    for char, escaped in _ESCAPES.items():
        text = text.replace(char, escaped)
    return text.encode('utf-8')
