from sellaporter.phases.errors import SellaporterError


class PageStoreError(SellaporterError):
    """Raised when the page store cannot be read or parsed."""

    pass
