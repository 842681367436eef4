"""Transfer objects exchanged at the API boundary."""

from credit_system.dto.request import CreditDto, CustomerDto, CustomerUpdateDto
from credit_system.dto.response import CreditView, CreditViewList, CustomerView

__all__ = [
    "CreditDto",
    "CreditView",
    "CreditViewList",
    "CustomerDto",
    "CustomerUpdateDto",
    "CustomerView",
]
