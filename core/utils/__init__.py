from core.utils.helpers import to_iso_date, to_date, to_int, clamp

__all__ = ["to_iso_date", "to_date", "to_int", "clamp"]
