from .trend_view import TrendView

__all__ = ["TrendView"]
