"""Error kinds raised at the scoring boundary."""


class ScorerError(ValueError):
    """Base class for invalid scoring input."""


class InvalidContentType(ScorerError):
    def __init__(self, label: str, allowed: list[str]):
        self.label = label
        self.allowed = allowed
        super().__init__(f"Unknown content type: {label!r} (expected one of: {', '.join(allowed)})")


class EmptyContent(ScorerError):
    def __init__(self):
        super().__init__("Content is empty")


class LexiconError(ScorerError):
    """A lexicon file or URL could not be loaded or is malformed."""
