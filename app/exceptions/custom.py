class FetchError(Exception):
    def __init__(self, message: str, url: str):
        self.message = message
        self.url = url
        super().__init__(message)


class BatchScrapeError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
