"""
Exceptions raised while reading necrodancer.xml.
"""


class NecroDataError(Exception):
    """Base class for all document loading errors."""

    pass


class DocumentReadError(NecroDataError):
    """Raised when the XML file cannot be opened or read."""

    pass


class DocumentParseError(NecroDataError):
    """Raised when the file is not well-formed XML."""

    pass


class SchemaError(NecroDataError):
    """Raised when the XML does not follow the expected necrodancer layout."""

    def __init__(self, description: str):
        super().__init__(f"Malformed necrodancer.xml: {description}")
        self.description = description
