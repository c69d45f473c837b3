class DomainError(Exception):
    """Base for all domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingRequiredFieldError(DomainError):
    """A rate limit selected for mapping lacks a field the mapping depends on."""

    def __init__(self, entity: str, field: str) -> None:
        self.entity = entity
        self.field = field
        super().__init__(f"{entity} is missing required field '{field}'")


class MalformedActionError(DomainError):
    """Matcher action with no (or more than one) populated variant."""

    pass


class ManifestError(DomainError):
    """Custom resource document could not be read into the domain model."""

    pass
