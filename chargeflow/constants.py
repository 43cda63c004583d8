"""Resource path roots and pagination vocabulary of the payments API."""

from typing import Any, Mapping

CHARGES_RESOURCE = "charges"
CUSTOMERS_RESOURCE = "customers"
CARDS_RESOURCE = "cards"
SCHEDULES_RESOURCE = "schedules"
OCCURRENCES_RESOURCE = "occurrences"

ORDER_CHRONOLOGICAL = "chronological"
ORDER_REVERSE_CHRONOLOGICAL = "reverse_chronological"

# Opaque query parameters passed to list endpoints unmodified. Recognised keys:
# order, limit, offset, from, to.
PaginationParams = Mapping[str, Any]
