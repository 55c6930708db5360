from __future__ import annotations
import re
import time
from email.utils import formatdate
from urllib.parse import quote, quote_plus, unquote, unquote_plus
from ..types import *
from ..guards import ensure_array

# characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"
_SECONDS_PER_DAY = 86400

_HTML_ENCODE = {
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&apos;',
}
_HTML_DECODE = {entity: char for char, entity in _HTML_ENCODE.items()}
_HTML_SPECIAL = re.compile('[' + re.escape(''.join(_HTML_ENCODE)) + ']')
_HTML_ENTITY = re.compile(r'&[a-z]+;')
_URL_ORIGIN = re.compile(r'^(?:[^/]*//)?[^/]*/')


def generate_cookie(name: str, value: str, *, expires: Optional[float] = None,
                    path: Optional[str] = None, domain: Optional[str] = None,
                    secure: bool = False, same_site: Optional[str] = None) -> str:
    """
    build a Set-Cookie style string.

    generate_cookie('=', '=') -> '%3D=%3D'
    generate_cookie('a', 'b', expires=7) -> 'a=b;expires=<7 days from now, GMT>'

    expires is in days relative to now; a negative value removes the cookie.
    """
    parts = [f"{quote(name, safe=_URI_COMPONENT_SAFE)}={quote(value, safe=_URI_COMPONENT_SAFE)}"]
    if expires:
        parts.append(f"expires={formatdate(time.time() + expires * _SECONDS_PER_DAY, usegmt=True)}")
    if path:
        parts.append(f"path={path}")
    if domain:
        parts.append(f"domain={domain}")
    if secure:
        parts.append("secure")
    if same_site:
        parts.append(f"samesite={same_site}")
    return ';'.join(parts)


def parse_cookies(cookie_string: str) -> Dict[str, str]:
    """parse_cookies('%3D=%3D; session="abc"') -> {'=': '=', 'session': 'abc'}"""
    cookies: Dict[str, str] = {}
    for entry in cookie_string.split('; '):
        name, sep, value = entry.partition('=')
        if not sep:
            continue
        if value.startswith('"'):
            value = value[1:-1]
        cookies[unquote(name)] = unquote(value)
    return cookies


def parse_query_string(query: str, *, separator: str = '&') -> Dict[str, List[str]]:
    """
    parse_query_string('?page=1&tag=a&tag=b') -> {'page': ['1'], 'tag': ['a', 'b']}
    entries without '=' or with an empty key are dropped.
    """
    if query.startswith('?'):
        query = query[1:]

    result: Dict[str, List[str]] = {}
    for entry in query.split(separator):
        key, sep, value = entry.partition('=')
        if not sep or not key:
            continue
        result.setdefault(unquote_plus(key), []).append(unquote_plus(value))
    return result


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def generate_query_string(params: Mapping[str, Any], *, separator: str = '&') -> str:
    """
    generate_query_string({'page': [1], 'limit': 20}) -> 'page=1&limit=20'
    None values are skipped, lists repeat the key and spaces become '+'.
    """
    pairs = []
    for key, value in params.items():
        if value is None:
            continue
        for item in ensure_array(value):
            if item is None:
                continue
            pairs.append(f"{quote_plus(str(key))}={quote_plus(_query_value(item))}")
    return separator.join(pairs)


def url_to_relative(url: str) -> str:
    """url_to_relative('https://domain.com/index.html') -> '/index.html'"""
    return '/' + _URL_ORIGIN.sub('', url, count=1)


def encode_html(html: str) -> str:
    """escape <>&"' as entities"""
    return _HTML_SPECIAL.sub(lambda m: _HTML_ENCODE[m.group(0)], html)


def decode_html(html: str) -> str:
    """restore the entities produced by encode_html; unknown entities are left as is"""
    return _HTML_ENTITY.sub(lambda m: _HTML_DECODE.get(m.group(0), m.group(0)), html)
