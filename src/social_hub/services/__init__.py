"""External collaborators of the composition workflow.

- ExtractionHandler: turns a URL into a title and body
- DistributionHandler: fans a submission out to the selected destinations

Both ship with local stand-ins (PlaceholderExtractor, LoggingDistributor);
real services plug in by matching the callable contracts.
"""

from .extraction import ExtractedContent, ExtractionHandler, PlaceholderExtractor
from .distribution import DistributionHandler, DistributionPayload, LoggingDistributor

__all__ = [
    "ExtractedContent",
    "ExtractionHandler",
    "PlaceholderExtractor",
    "DistributionHandler",
    "DistributionPayload",
    "LoggingDistributor",
]
