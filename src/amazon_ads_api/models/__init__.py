"""Amazon Ads API models package.

Contains the Sponsored Products entity models, report models and the
enumerations they use, together with the registry that drives hydration.
"""

from .base import ApiModel, ModelList
from .catalog import registry
from .entities import (
    AdGroup,
    AdGroupBidRecommendation,
    AdGroupEx,
    AdGroupExList,
    AdGroupList,
    AdGroupParams,
    AdGroupResponse,
    AdGroupResponseList,
    Bidding,
    Campaign,
    CampaignList,
    CampaignNegativeKeyword,
    CampaignNegativeKeywordEx,
    CampaignNegativeKeywordExList,
    CampaignNegativeKeywordList,
    Keyword,
    KeywordList,
    PlacementAdjustment,
    SuggestedBid,
)
from .enums import (
    BiddingStrategy,
    CampaignType,
    MatchType,
    NegativeMatchType,
    PlacementPredicate,
    ReportRecordType,
    ReportSegment,
    ReportStatus,
    ServingStatus,
    State,
    TargetingType,
)
from .reports import (
    AdGroupReport,
    AdGroupReportList,
    AdGroupReportParams,
    AsinReport,
    AsinReportList,
    AsinReportParams,
    CampaignReport,
    CampaignReportList,
    CampaignReportParams,
    KeywordReport,
    KeywordReportList,
    KeywordReportParams,
    PerformanceRecord,
    ProductAdReport,
    ProductAdReportList,
    ProductAdReportParams,
    ReportJob,
    ReportParams,
    TargetReport,
    TargetReportList,
    TargetReportParams,
)

__all__ = [
    "ApiModel",
    "ModelList",
    "registry",
    # Enums
    "BiddingStrategy",
    "CampaignType",
    "MatchType",
    "NegativeMatchType",
    "PlacementPredicate",
    "ReportRecordType",
    "ReportSegment",
    "ReportStatus",
    "ServingStatus",
    "State",
    "TargetingType",
    # Entities
    "PlacementAdjustment",
    "Bidding",
    "Campaign",
    "CampaignList",
    "AdGroup",
    "AdGroupEx",
    "AdGroupParams",
    "AdGroupResponse",
    "SuggestedBid",
    "AdGroupBidRecommendation",
    "AdGroupList",
    "AdGroupExList",
    "AdGroupResponseList",
    "Keyword",
    "KeywordList",
    "CampaignNegativeKeyword",
    "CampaignNegativeKeywordEx",
    "CampaignNegativeKeywordList",
    "CampaignNegativeKeywordExList",
    # Reports
    "ReportJob",
    "ReportParams",
    "CampaignReportParams",
    "AdGroupReportParams",
    "KeywordReportParams",
    "ProductAdReportParams",
    "TargetReportParams",
    "AsinReportParams",
    "PerformanceRecord",
    "CampaignReport",
    "AdGroupReport",
    "KeywordReport",
    "ProductAdReport",
    "TargetReport",
    "AsinReport",
    "CampaignReportList",
    "AdGroupReportList",
    "KeywordReportList",
    "ProductAdReportList",
    "TargetReportList",
    "AsinReportList",
]
