"""Domain errors raised by the occurrence pipeline.

Library code raises these; only the CLI turns them into exit codes.
An empty query result is not an error.
"""


class OccurrenceMapperError(Exception):
    """Base class for occurrence pipeline failures."""

    error_code = "OCCURRENCE_MAPPER_ERROR"


class DataSourceUnavailable(OccurrenceMapperError):
    """The remote occurrence service could not be reached or failed."""

    error_code = "DATA_SOURCE_UNAVAILABLE"


class InvalidTaxonKey(OccurrenceMapperError):
    """The taxon key (or name) does not identify a taxon in the data source."""

    error_code = "INVALID_TAXON_KEY"
