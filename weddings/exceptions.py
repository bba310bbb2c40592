"""Exception hierarchy for wedding invite operations."""


class WeddingsError(Exception):
    """Base exception for wedding invite operations."""

    pass


class DetailsNotFoundError(WeddingsError):
    """Details document could not be fetched (missing file or non-success status)."""

    pass


class ConfigurationError(WeddingsError):
    """Details document is present but unusable."""

    pass


class DetailsFormatError(ConfigurationError):
    """Details document is not valid JSON or not a JSON object."""

    pass


class RequiredFieldError(ConfigurationError):
    """A field the invite cannot render without is missing or invalid."""

    def __init__(self, fields: list[str], slug: str | None = None):
        self.fields = fields
        self.slug = slug
        where = f" in '{slug}'" if slug else ""
        super().__init__(f"Missing or invalid required field(s){where}: {', '.join(fields)}")


class CalendarGenerationError(WeddingsError):
    """Error while generating or writing a calendar file."""

    pass
