"""Exceptions raised by the storage and email gateways."""


class PortfolioBackendError(Exception):
    pass


class StorageError(PortfolioBackendError):
    """The database could not be reached or the statement failed."""


class DeliveryError(PortfolioBackendError):
    """The notification email was not accepted by the mail relay."""
