class ScrapeError(Exception):
    def __init__(self, message: str, source: str | None = None):
        self.message = message
        self.source = source
        super().__init__(message)


class TargetScrapeError(ScrapeError):
    pass


class ListingSiteError(ScrapeError):
    pass


class OrchestrationError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
