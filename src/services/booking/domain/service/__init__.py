from .price_calculator import TAX_RATE, PriceBreakdown, compute_price

__all__ = ["TAX_RATE", "PriceBreakdown", "compute_price"]
