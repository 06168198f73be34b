"""Enumerations used by Sponsored Products models.

Values are the API's wire values, verbatim. A value outside these sets
fails hydration with ``UnknownEnumValue``.
"""

from enum import Enum


class State(str, Enum):
    """Entity states shared by campaigns, ad groups and keywords."""

    ENABLED = "enabled"
    PAUSED = "paused"
    ARCHIVED = "archived"


class ServingStatus(str, Enum):
    """Serving status reported on extended entities."""

    AD_GROUP_ARCHIVED = "AD_GROUP_ARCHIVED"
    AD_GROUP_PAUSED = "AD_GROUP_PAUSED"
    AD_GROUP_STATUS_ENABLED = "AD_GROUP_STATUS_ENABLED"
    AD_GROUP_INCOMPLETE = "AD_GROUP_INCOMPLETE"
    AD_POLICING_SUSPENDED = "AD_POLICING_SUSPENDED"
    CAMPAIGN_ARCHIVED = "CAMPAIGN_ARCHIVED"
    CAMPAIGN_PAUSED = "CAMPAIGN_PAUSED"
    CAMPAIGN_STATUS_ENABLED = "CAMPAIGN_STATUS_ENABLED"
    CAMPAIGN_OUT_OF_BUDGET = "CAMPAIGN_OUT_OF_BUDGET"
    CAMPAIGN_INCOMPLETE = "CAMPAIGN_INCOMPLETE"
    ACCOUNT_OUT_OF_BUDGET = "ACCOUNT_OUT_OF_BUDGET"
    ADVERTISER_PAYMENT_FAILURE = "ADVERTISER_PAYMENT_FAILURE"
    PENDING_START_DATE = "PENDING_START_DATE"
    ENDED = "ENDED"
    TARGETING_CLAUSE_ARCHIVED = "TARGETING_CLAUSE_ARCHIVED"
    TARGETING_CLAUSE_PAUSED = "TARGETING_CLAUSE_PAUSED"
    TARGETING_CLAUSE_STATUS_LIVE = "TARGETING_CLAUSE_STATUS_LIVE"
    TARGETING_CLAUSE_POLICING_SUSPENDED = "TARGETING_CLAUSE_POLICING_SUSPENDED"


class TargetingType(str, Enum):
    MANUAL = "manual"
    AUTO = "auto"


class CampaignType(str, Enum):
    SPONSORED_PRODUCTS = "sponsoredProducts"


class BiddingStrategy(str, Enum):
    LEGACY_FOR_SALES = "legacyForSales"
    AUTO_FOR_SALES = "autoForSales"
    MANUAL = "manual"


class PlacementPredicate(str, Enum):
    PLACEMENT_TOP = "placementTop"
    PLACEMENT_PRODUCT_PAGE = "placementProductPage"


class MatchType(str, Enum):
    """Keyword match types."""

    EXACT = "exact"
    PHRASE = "phrase"
    BROAD = "broad"


class NegativeMatchType(str, Enum):
    """Negative keyword match types."""

    NEGATIVE_EXACT = "negativeExact"
    NEGATIVE_PHRASE = "negativePhrase"


class ReportStatus(str, Enum):
    """Report generation status.

    ``SUCCESS`` and ``FAILURE`` are terminal.
    """

    IN_PROGRESS = "IN_PROGRESS"
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


class ReportSegment(str, Enum):
    QUERY = "query"
    PLACEMENT = "placement"


class ReportRecordType(str, Enum):
    """Report record types.

    The value is the path segment used to request the report
    (``sp/{value}/report``); the same member selects the list type used
    to decode the downloaded rows.
    """

    CAMPAIGNS = "campaigns"
    AD_GROUPS = "adGroups"
    KEYWORDS = "keywords"
    PRODUCT_ADS = "productAds"
    ASINS = "asins"
    TARGETS = "targets"
