from __future__ import annotations
import math
import re
from .types import *

_SIZE_UNITS = ['Bytes', 'KB', 'MB', 'GB', 'TB', 'PB', 'EB', 'ZB', 'YB']
_SIZE_PATTERN = re.compile(r'^\s*(\d+(?:\.\d+)?)\s*([a-z]+)\s*$', re.IGNORECASE)


def format_bytes(size: Union[int, float], decimals: int = 2) -> str:
    """format_bytes(1648 * 9884) -> '15.53 MB'. non-positive sizes give '0 Bytes'."""
    if size <= 0:
        return '0 Bytes'

    precision = max(decimals, 0)
    exponent = max(0, min(int(math.floor(math.log(size, 1024))), len(_SIZE_UNITS) - 1))
    value = round(size / 1024 ** exponent, precision)
    # drop trailing zeros the way a float round-trip would: 1.50 -> 1.5, 2.00 -> 2
    text = f"{value:.{precision}f}".rstrip('0').rstrip('.') if precision else f"{value:.0f}"
    return f"{text} {_SIZE_UNITS[exponent]}"


def parse_size(text: str) -> float:
    """
    inverse of format_bytes: '1.6 KB' -> 1638.4.
    unparseable text gives 0.
    """
    match = _SIZE_PATTERN.match(text)
    if not match:
        return 0
    number, unit = match.groups()
    units = [u.lower() for u in _SIZE_UNITS]
    if unit.lower() not in units:
        return 0
    result = float(number) * 1024 ** units.index(unit.lower())
    return int(result) if result.is_integer() else round(result, 10)


def get_file_parts(pathname: str) -> Tuple[str, str]:
    """
    split into (root, ext) where ext is empty or starts with a dot.
    leading dots of the file name are not extensions: '.cshrc' -> ('.cshrc', '')
    """
    name = pathname.split('/')[-1]
    parts = name.split('.')
    min_parts = 2 if name.startswith('.') else 1
    if len(parts) > min_parts and parts[-1]:
        extension = parts[-1]
        return pathname[:-(len(extension) + 1)], f".{extension}"
    return pathname, ''
