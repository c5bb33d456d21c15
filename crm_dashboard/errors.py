"""Errors raised by range construction and timestamp filtering."""


class InvalidPeriod(ValueError):
    """Period kind not recognized, or a range that cannot be built from it."""

    def __init__(self, period, message: str | None = None):
        self.period = period
        super().__init__(message or f"Invalid period: '{period}'")


class MalformedTimestamp(ValueError):
    """Timestamp present but not parseable into an absolute instant."""

    def __init__(self, value, reason: str = "not an ISO-8601 timestamp"):
        self.value = value
        super().__init__(f"Malformed timestamp {value!r}: {reason}")


class InvalidTimezone(ValueError):
    """Calendar context is not a known IANA timezone name."""

    def __init__(self, tz):
        self.tz = tz
        super().__init__(
            f"Timezone '{tz}' is not a known IANA timezone "
            "(examples: UTC, America/Sao_Paulo, Europe/Lisbon)"
        )
