class LithographError(Exception):
    """Base class for content pipeline failures."""


class NotFound(LithographError):
    """A requested post or asset is not in its content store."""

    def __init__(self, name: str):
        super().__init__(f"{name} not found")
        self.name = name


class ExtractionError(LithographError):
    """Front matter is missing required fields or cannot be parsed."""


class DateParseError(LithographError):
    """A front matter date does not match the configured format or is not a real calendar date."""

    def __init__(self, value: str, date_format: str):
        super().__init__(f"Date {value!r} does not match format {date_format!r}")
        self.value = value
        self.date_format = date_format


class ContentTypeError(LithographError):
    """An asset's extension does not map to a known content type."""
