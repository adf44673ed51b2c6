"""
Fixed user-facing messages raised by the service layer.
"""


class ServicesConstants:
    BUSINESS_UNIT_NOT_FOUND = "Business unit not found!"
    BUSINESS_UNIT_CATEGORY_NOT_FOUND = "Business unit category not found!"
    USER_NOT_FOUND = "User not found!"
    REVIEW_NOT_FOUND = "Review not found!"
