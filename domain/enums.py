"""
Domain enums for the ElaineDiet service.
"""

import enum


class MealType(str, enum.Enum):
    """Expected meal labels (informational, not enforced)"""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"

    @classmethod
    def is_known(cls, label: str) -> bool:
        return label in {m.value for m in cls}


class SortOrder(str, enum.Enum):
    """Listing order on creation time"""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value) -> "SortOrder":
        """Case-insensitive 'asc' is ascending; anything else is descending"""
        if value is not None and str(value).strip().lower() == cls.ASC.value:
            return cls.ASC
        return cls.DESC
