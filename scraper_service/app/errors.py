class ScraperError(Exception):
    """Base class for review acquisition errors."""


class SourceUnavailable(ScraperError):
    """A single review source failed (network, status, timeout or parse)."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"{source} unavailable: {reason}")
        self.source = source
        self.reason = reason


class NoReviewsFound(ScraperError):
    """Every live source came back empty. Resolved by the synthetic fallback."""
