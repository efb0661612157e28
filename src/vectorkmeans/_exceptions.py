class KMeansError(Exception):
    """Base class for every error raised by vectorkmeans."""


class DimensionMismatchError(KMeansError, ValueError):
    """Two vectors being compared report different lengths."""


class InvalidKError(KMeansError, ValueError):
    """The requested number of centroids cannot be picked from the points."""


class DimensionIndexOutOfBoundsError(KMeansError, IndexError):
    """A vector was asked for a dimension past its declared length."""
