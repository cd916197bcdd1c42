import logging
import re
import string
from typing import Dict, Mapping
from urllib.parse import parse_qsl, quote

# --- Response bodies ---
ACCESS_GRANTED = '{"access":1, "error":"blah"}'
MISSING_TOKEN = '{"access":0, "error":"missing token"}'

TOKEN_KEY = "token"

# A '%' not followed by two hex digits
BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_query(raw_query: bytes) -> str:
    """Decodes the raw query bytes; bytes that are not UTF-8 are left percent-encoded"""
    try:
        return raw_query.decode("utf-8")
    except UnicodeDecodeError:
        return quote(raw_query, safe=string.punctuation)


def parse_query(raw_query: str) -> Dict[str, str]:
    """Parses the query component; a malformed query is treated as empty"""
    if BAD_ESCAPE.search(raw_query):
        return {}
    try:
        pairs = parse_qsl(raw_query, keep_blank_values=True, errors="strict")
    except ValueError:
        return {}
    return dict(pairs)


def select_body(query: Mapping[str, str]) -> str:
    """Picks the response body; only the presence of the token key matters"""
    if TOKEN_KEY in query:
        return ACCESS_GRANTED
    return MISSING_TOKEN


class AccessHandler:
    """
    Answers access queries from controllers.

    The logger is passed in so that each app (and each test) can
    choose its own sink.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def handle(self, target: str, raw_query: str = "") -> str:
        self.logger.info(target)

        query = parse_query(raw_query)
        if TOKEN_KEY in query:
            self.logger.info(query[TOKEN_KEY])

        return select_body(query)
