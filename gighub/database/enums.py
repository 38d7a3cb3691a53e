"""
gighub/database/enums.py

Enumerations

Defines enumerations used across the platform:
- UserRole: Roles assigned to accounts (client, freelancer)
- OrderStatus: The two states an order can be in
"""

from enum import Enum

# ---------------------------------------------------
# User Role Enumeration
# ---------------------------------------------------


class UserRole(str, Enum):
    """
    Enum representing account roles for access control.

    Values:
    - client: browses, orders, rates and wishlists gigs
    - freelancer: publishes gigs and delivers orders
    """

    CLIENT = "client"
    FREELANCER = "freelancer"


# ---------------------------------------------------
# Order Status Enumeration
# ---------------------------------------------------


class OrderStatus(str, Enum):
    """
    Enum representing the status of an order.

    Both directions (pending <-> delivered) are accepted as status writes.
    """

    PENDING = "pending"
    DELIVERED = "delivered"


def enum_values(enum_cls: type[Enum]) -> list[str]:
    """Persist enum values (not member names) in the database."""
    return [member.value for member in enum_cls]
