"""
Zoho Creator error catalog.

Zoho's XML error list only carries numeric codes, so the descriptions are
kept here. Source: https://api.creator.zoho.com/Creator-Error-Codes.html

Code 2907 is published twice ("NULL criteria provided for update." and
"NULL criteria provided for view."). Only the view wording is kept.
"""

from types import MappingProxyType
from typing import Mapping, Optional

NO_RECORDS_FOUND_CODE = "2902"

ERROR_CODES: Mapping[str, str] = MappingProxyType({
    "2830": "Invalid XML.",
    "2831": "Missing apikey in the request.",
    "2832": "Missing application owner in the request.",
    "2833": "Missing application name in the request.",
    "2834": "Missing form name in the request.",
    "2835": "Missing view name in the request.",
    "2836": "Missing operation in the request.",
    "2890": "Invalid apikey.",
    "2891": "Invalid application owner.",
    "2892": "Invalid application name.",
    "2893": "Invalid form name.",
    "2894": "Invalid view name.",
    "2895": "Invalid operation.",
    "2896": "Permission denied to delete records.",
    "2897": "Permission denied to update records.",
    "2898": "Permission denied to view records.",
    "2899": "Permission denied to add records.",
    "2900": "Invalid column name.",
    "2901": "Invalid Operator.",
    NO_RECORDS_FOUND_CODE: "No records found with specified criteria.",
    "2903": "Incomplete criteria. The final relational operator must end with a dot(.)",
    "2904": "Value specified for formula field.",
    "2905": "Error occured while fetching data. Your data is safe.",
    "2906": "NULL criteria provided for delete.",
    "2907": "NULL criteria provided for view.",
    "2909": "Get request not supported.",
    "2910": "Invalid Email-id.",
    "2911": "No access.",
    "2912": "No such user.",
    "2913": "Invalid ticket.",
    "2914": "Private and shared applications cannot be copied.",
    "2915": "Limit should not exceed 5000.",
    "2917": "You must login to access this API.",
})


def lookup_error(code: Optional[str]) -> Optional[str]:
    """Return the description for a Zoho error code, or None if unknown."""
    if code is None:
        return None
    return ERROR_CODES.get(str(code).strip())
