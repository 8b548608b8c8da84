"""
======================================================
PATH: orders/services/exceptions.py
======================================================
ORDER DOMAIN ERRORS

All are user-facing business-rule rejections: views return them as
HTTP 400 {"detail": str(exc)}.
"""


class OrderError(Exception):
    """Base class for order business-rule failures."""


class OrderingPausedError(OrderError):
    pass


class EmptyOrderError(OrderError):
    pass


class ProductUnavailableError(OrderError):
    pass


class InsufficientStockError(OrderError):
    pass


class PaymentMethodNotAllowedError(OrderError):
    pass


class InvalidOrderTransitionError(OrderError):
    pass
