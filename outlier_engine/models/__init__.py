from .outliers import OutlierOptions, OutlierResult

__all__ = ["OutlierOptions", "OutlierResult"]
