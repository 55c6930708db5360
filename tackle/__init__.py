"""
'  _____  _    ____ _  ___     _____
' |_   _|/ \  / ___| |/ / |   | ____|
'   | | / _ \| |   | ' /| |   |  _|
'   | |/ ___ \ |___| . \| |___| |___
'   |_/_/   \_\____|_|\_\_____|_____|
"""
import logging

# library code logs, applications decide where it goes
logging.getLogger(__name__).addHandler(logging.NullHandler())

# shared types
from .types import Kind, kind_of, Group, Hole, Logger

# sequences
from .array import sort_by, sort_by_cb, generate_range, flatten
from .grouping import group_by, index_by, deduplicate, deduplicate_by, chunk
from .set import difference, intersection, union
from .iterable import flat_map, map_, filter_

# functions and time
from .fp import pipe, compose, curry, try_catch, HOLE
from .timing import delay, debounce, throttle
from .cache import cache

# structures
from .object import (
    is_equal,
    clone,
    merge,
    convert_to_nested,
    parse_json_or_raw,
    get_by_key
)
from .encoding import canonical_json, hash_code, base64_encode, base64_decode, generate_uuid
from .guards import (
    is_number,
    is_boolean,
    is_string,
    is_array,
    is_error,
    is_none,
    is_plain_object,
    is_empty,
    is_not,
    assert_error,
    assert_not_error,
    ensure_array
)

# text, randomness, files, logging
from .string import is_letter, truncate, extract_words, camel_case, pascal_case, title_case
from .random import seed, random_int, random_choice, random_choices, random_string, shuffle
from .files import format_bytes, parse_size, get_file_parts
from .log import get_logger, create_dummy_logger

# http
from .http import (
    HttpStatusCodes,
    HttpStatusReasons,
    HttpError,
    describe_error,
    generate_cookie,
    parse_cookies,
    parse_query_string,
    generate_query_string,
    url_to_relative,
    encode_html,
    decode_html,
    get_mime_type,
    get_extension
)

__all__ = [
    "Kind", "kind_of", "Group", "Hole", "Logger",
    "sort_by", "sort_by_cb", "generate_range", "flatten",
    "group_by", "index_by", "deduplicate", "deduplicate_by", "chunk",
    "difference", "intersection", "union",
    "flat_map", "map_", "filter_",
    "pipe", "compose", "curry", "try_catch", "HOLE",
    "delay", "debounce", "throttle",
    "cache",
    "is_equal", "clone", "merge", "convert_to_nested", "parse_json_or_raw", "get_by_key",
    "canonical_json", "hash_code", "base64_encode", "base64_decode", "generate_uuid",
    "is_number", "is_boolean", "is_string", "is_array", "is_error", "is_none",
    "is_plain_object", "is_empty", "is_not", "assert_error", "assert_not_error", "ensure_array",
    "is_letter", "truncate", "extract_words", "camel_case", "pascal_case", "title_case",
    "seed", "random_int", "random_choice", "random_choices", "random_string", "shuffle",
    "format_bytes", "parse_size", "get_file_parts",
    "get_logger", "create_dummy_logger",
    "HttpStatusCodes", "HttpStatusReasons", "HttpError", "describe_error",
    "generate_cookie", "parse_cookies", "parse_query_string", "generate_query_string",
    "url_to_relative", "encode_html", "decode_html", "get_mime_type", "get_extension",
]
