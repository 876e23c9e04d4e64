"""
Error kinds raised inside the ingestion pipeline.

Only TopicNotFound ever reaches the caller. The others abort a single record
or a single format attempt and are absorbed by the parsers / router.
"""


class IngestionError(ValueError):
    """Base class for recoverable parsing failures."""


class ExtractionFailure(IngestionError):
    """No opening brace, or the braces never balance."""


class StructureFailure(IngestionError):
    """JSON object present but the 'questions' array is missing or malformed."""


class FieldFailure(IngestionError):
    """One record is missing question text, difficulty or options."""


class TopicNotFound(LookupError):
    """None of the resolver strategies matched the query."""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"Topic not found: {query}")
