from .availability import ORDERING_PAUSED_MESSAGE, is_accepting_orders

__all__ = ["ORDERING_PAUSED_MESSAGE", "is_accepting_orders"]
