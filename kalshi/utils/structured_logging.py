"""
Log sanitizing for production environments.

Keeps session tokens and passwords out of log output.
"""

import logging
import re


class CredentialRedactionFilter(logging.Filter):
    """
    Security filter that redacts credentials from log messages.

    - Redacts bearer tokens ("Bearer <token>")
    - Redacts password/token/secret key-value pairs
    - Redacts credentials in exception text

    Usage:
        >>> handler = logging.StreamHandler()
        >>> handler.addFilter(CredentialRedactionFilter())
        >>> logger.addHandler(handler)
    """

    BEARER_PATTERN = re.compile(r'(Bearer\s+)[A-Za-z0-9._~+/:=-]+', re.IGNORECASE)
    # Keep the prefix (password=) and drop the value
    KEY_VALUE_PATTERN = re.compile(
        r'((?:password|token|secret|authorization)["\']?\s*[:=]\s*["\']?)[^\s"\',}]+',
        re.IGNORECASE
    )

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Redact credentials from log record.

        Args:
            record: Log record to filter

        Returns:
            Always True (record is never filtered out, just sanitized)
        """
        if record.msg:
            record.msg = self._redact_credentials(str(record.msg))

        # Non-string args stay as-is so %d/%f placeholders still format
        if record.args:
            if isinstance(record.args, dict):
                record.args = {
                    k: self._redact_arg(v)
                    for k, v in record.args.items()
                }
            elif isinstance(record.args, tuple):
                record.args = tuple(
                    self._redact_arg(arg)
                    for arg in record.args
                )

        # Formatters only fill exc_text after filters run, so render it here
        if record.exc_info and not record.exc_text:
            record.exc_text = logging.Formatter().formatException(record.exc_info)

        if record.exc_text:
            record.exc_text = self._redact_credentials(record.exc_text)

        return True

    def _redact_arg(self, arg):
        if isinstance(arg, str):
            return self._redact_credentials(arg)
        return arg

    def _redact_credentials(self, text: str) -> str:
        if not text:
            return text

        text = self.BEARER_PATTERN.sub(r'\1[REDACTED]', text)
        text = self.KEY_VALUE_PATTERN.sub(r'\1[REDACTED]', text)
        return text
