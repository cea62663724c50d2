"""Exception types raised by the analysis pipeline and its collaborators."""


class AnalysisError(Exception):
    """Base class for all analysis failures."""


class ExtractionError(AnalysisError):
    """The uploaded document could not be read as a PDF. Fatal."""


class EnrichmentUnavailable(AnalysisError):
    """The insight provider is absent, misconfigured or out of retries."""


class TransientProviderError(EnrichmentUnavailable):
    """Rate-limit or temporary-unavailability signal from the provider."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedProviderResponse(EnrichmentUnavailable):
    """Provider output could not be parsed into the expected structure."""
