from __future__ import annotations
import re
import string as _string
from .types import *

ascii_lowercase = _string.ascii_lowercase
ascii_uppercase = _string.ascii_uppercase
ascii_letters = _string.ascii_letters
digits = _string.digits
hexdigits = _string.hexdigits
octdigits = _string.octdigits
punctuation = _string.punctuation

_WORD_SEPARATORS = re.compile(r'[ -./\\()"\',;<>~!@#$%^&*|+=\[\]{}`?:]+')
_LEADING_DELIMITERS = re.compile(r'^[_.\- ]+')
_INNER_DELIMITERS = re.compile(r'[_.\- ]+(\w|$)')
_DIGIT_RUNS = re.compile(r'\d+(\w|$)')


def is_letter(value: str) -> bool:
    """true if the text has a cased character, so 'Ž' counts and '9' does not"""
    return value.lower() != value.upper()


def truncate(value: str, length: int, ending: str = '...') -> str:
    """truncate('Hello world', 8) -> 'Hello...'"""
    if len(value) > length:
        return value[:max(length - len(ending), 0)] + ending
    return value


def extract_words(value: str) -> List[str]:
    """split on punctuation and whitespace. underscores stay inside words."""
    return [word for word in _WORD_SEPARATORS.split(value) if word]


def camel_case(value: str) -> str:
    """'foo-bar' -> 'fooBar', '--foo1bar' -> 'foo1Bar'"""
    result = _LEADING_DELIMITERS.sub('', value).lower()
    result = _INNER_DELIMITERS.sub(lambda m: m.group(1).upper(), result)
    return _DIGIT_RUNS.sub(lambda m: m.group(0).upper(), result)


def pascal_case(value: str) -> str:
    parsed = camel_case(value)
    return parsed[:1].upper() + parsed[1:]


def title_case(value: str) -> str:
    """upper-case every character that does not follow a letter"""
    chars = []
    for index, char in enumerate(value):
        if index > 0 and is_letter(value[index - 1]):
            chars.append(char.lower())
        else:
            chars.append(char.upper())
    return ''.join(chars)
