from typing import Optional

_TRUE = ("y", "yes", "t", "true", "on", "1")
_FALSE = ("n", "no", "f", "false", "off", "0")


def strtobool(val: Optional[str], default: bool = False) -> bool:
    try:
        val = val.strip().lower()
    except AttributeError:
        return default
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    return default
