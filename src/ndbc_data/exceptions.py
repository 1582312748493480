"""
Exceptions for NDBC data retrieval and parsing.
"""


class NdbcDataError(Exception):
    """Base exception for NDBC data errors."""

    pass


class MetadataParseError(NdbcDataError):
    """Station metadata document could not be parsed."""

    pass


class NoStationsFoundError(NdbcDataError):
    """Station metadata contained no station with meteorological data."""

    pass


class NoHeaderFoundError(NdbcDataError):
    """Station feed has no recognizable standard met header."""

    pass


class NoDataRowsError(NdbcDataError):
    """Station feed has a header but no decodable data rows."""

    pass


class EmptyFeedError(NdbcDataError):
    """Station feed body was empty."""

    pass


class FetchError(NdbcDataError):
    """Error retrieving a document from NDBC."""

    pass


class StationDataUnavailableError(FetchError):
    """NDBC has no realtime feed for the station (HTTP 404)."""

    pass
