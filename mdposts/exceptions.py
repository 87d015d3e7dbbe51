class ContentError(Exception):
    """Base class for everything the content loader raises."""


class ContentDirectoryError(ContentError):
    """The content directory is missing or unreadable. Aborts the build."""


class FrontMatterError(ContentError):
    """A file has no usable ``+++`` front-matter block."""


class PostValidationError(ContentError):
    """Front matter parsed, but a required field is missing or invalid."""
