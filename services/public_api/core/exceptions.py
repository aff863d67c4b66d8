"""Errors raised while talking to the downstream store services."""


class DownstreamServiceError(RuntimeError):
    """Base class for failures of a call to another service."""


class ServiceCallError(DownstreamServiceError):
    """The call could not be completed or returned an unexpected status."""


class ServiceResultError(DownstreamServiceError):
    """The call completed but the service reported ``result: false``."""


__all__ = ["DownstreamServiceError", "ServiceCallError", "ServiceResultError"]
