"""
Connection string parser micro-component.
Classifies a 1C connection string into server, file or web form.
Railway-oriented: returns Success with ParsedConnection or Failure.
"""

from __future__ import annotations

import logging
import re

from rbaserun.domain.connection.models import ParsedConnection
from rbaserun.domain.errors import UnrecognizedFormat
from rbaserun.infrastructure.results import Failure, Result, Success

logger = logging.getLogger(__name__)


def _key(name: str) -> re.Pattern[str]:
    return re.compile(rf'(?:^|;)\s*{name}\s*=', re.IGNORECASE)


def _quoted(name: str) -> re.Pattern[str]:
    return re.compile(rf'(?:^|;)\s*{name}\s*=\s*"([^"]+)"', re.IGNORECASE)


WS_KEY = _key("ws")
FILE_KEY = _key("file")
SRVR_KEY = _key("srvr")
REF_KEY = _key("ref")

WS_VALUE = _quoted("ws")
FILE_VALUE = _quoted("file")
SRVR_VALUE = _quoted("srvr")
REF_VALUE = _quoted("ref")

# Connection strings are single-line
CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


class ConnectionStringParser:
    """
    Parses 1C information base connection strings.

    Supported forms, checked from most to least specific:
        ws="https://host/base";
        File="C:\\bases\\base";
        Srvr="host";Ref="base";
        host;base
    """

    def parse(self, raw: str) -> Result[ParsedConnection, UnrecognizedFormat]:
        """Classify raw and extract the values its form carries."""
        if not raw or not raw.strip():
            return Failure(UnrecognizedFormat(raw or "", "empty connection string"))

        s = raw.strip()
        if CONTROL_CHARS.search(s):
            return Failure(UnrecognizedFormat(s, "connection string must be a single line without control characters"))

        if WS_KEY.search(s):
            result = self._parse_web_form(s)
        elif FILE_KEY.search(s):
            result = self._parse_file_form(s)
        elif SRVR_KEY.search(s) and REF_KEY.search(s):
            result = self._parse_server_form(s)
        elif ";" in s and "=" not in s:
            result = self._parse_simple_form(s)
        else:
            result = Failure(UnrecognizedFormat(s))

        if isinstance(result, Success):
            logger.debug("Parsed %r as %s", s, result.value.kind.value)
        else:
            logger.debug("Rejected %r: %s", s, result.error.reason)
        return result

    def _parse_simple_form(self, s: str) -> Result[ParsedConnection, UnrecognizedFormat]:
        body = s[:-1] if s.endswith(";") else s
        parts = [part.strip() for part in body.split(";")]
        if len(parts) != 2 or not all(parts):
            return Failure(UnrecognizedFormat(s, "expected pattern: host;ref"))
        host, ref_name = parts
        return Success(ParsedConnection.server(host, ref_name, simple=True))

    def _parse_server_form(self, s: str) -> Result[ParsedConnection, UnrecognizedFormat]:
        host = SRVR_VALUE.search(s)
        ref_name = REF_VALUE.search(s)
        if not host or not ref_name:
            return Failure(UnrecognizedFormat(s, 'expected pattern: Srvr="host";Ref="ref";'))
        return Success(ParsedConnection.server(host.group(1), ref_name.group(1)))

    def _parse_file_form(self, s: str) -> Result[ParsedConnection, UnrecognizedFormat]:
        match = FILE_VALUE.search(s)
        if not match:
            return Failure(UnrecognizedFormat(s, 'expected pattern: File="<path>";'))
        return Success(ParsedConnection.file(match.group(1)))

    def _parse_web_form(self, s: str) -> Result[ParsedConnection, UnrecognizedFormat]:
        match = WS_VALUE.search(s)
        if not match:
            return Failure(UnrecognizedFormat(s, 'expected pattern: ws="<url>";'))
        return Success(ParsedConnection.web(match.group(1)))
