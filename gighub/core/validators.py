"""
core/validators.py

Field validators shared by the request schemas.

Each validator receives an already type-coerced value and either returns it
(possibly normalized) or raises ValueError with the message shown to the caller.
"""

from typing import Final

# -------------------------------
# Constants
# -------------------------------
TITLE_MIN_LENGTH: Final[int] = 10
TITLE_MAX_LENGTH: Final[int] = 100
DESCRIPTION_MIN_LENGTH: Final[int] = 50
DESCRIPTION_MAX_LENGTH: Final[int] = 2000
MAX_PRICE: Final[float] = 10_000
MAX_DELIVERY_DAYS: Final[int] = 365
NAME_MAX_LENGTH: Final[int] = 100


# -------------------------------
# Validator Functions
# -------------------------------
def title_validator(title: str) -> str:
    """Strips whitespace; the remaining title must be 10-100 characters."""
    title = title.strip()
    if not TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
        raise ValueError(
            f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters"
        )
    return title


def description_validator(description: str) -> str:
    description = description.strip()
    if not DESCRIPTION_MIN_LENGTH <= len(description) <= DESCRIPTION_MAX_LENGTH:
        raise ValueError(
            f"Description must be between {DESCRIPTION_MIN_LENGTH} and {DESCRIPTION_MAX_LENGTH} characters"
        )
    return description


def category_validator(category: str) -> str:
    category = category.strip()
    if not category:
        raise ValueError("Category is required")
    return category


def price_validator(price: float) -> float:
    if not 0 < price <= MAX_PRICE:
        raise ValueError("Price must be greater than $0 and at most $10,000")
    return price


def delivery_time_validator(days: int) -> int:
    if not 0 < days <= MAX_DELIVERY_DAYS:
        raise ValueError("Delivery time must be between 1 and 365 days")
    return days


def tags_validator(tags: list[str]) -> list[str]:
    """Drops blank tags and duplicates while keeping first-seen order."""
    seen: dict[str, None] = {}
    for tag in tags:
        tag = tag.strip()
        if tag:
            seen.setdefault(tag, None)
    return list(seen)


def rating_validator(rating: float) -> float:
    """Star ratings (gig ratings and order reviews) may be any number from 1 to 5."""
    if not 1 <= rating <= 5:
        raise ValueError("Rating must be between 1 and 5")
    return rating


def name_validator(name: str) -> str:
    """Strips whitespace; the remaining display name must be 1-100 characters."""
    name = name.strip()
    if not name:
        raise ValueError("Name cannot be blank")
    if len(name) > NAME_MAX_LENGTH:
        raise ValueError(f"Name must be at most {NAME_MAX_LENGTH} characters")
    return name
