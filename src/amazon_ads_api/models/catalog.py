"""The package's type registry.

Every model and list type shipped with the package is registered here,
once, at import. Adding a model means adding it to one of these tuples.
"""

from ..hydration.registry import TypeRegistry
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
    ProductAdReport,
    ProductAdReportList,
    ProductAdReportParams,
    ReportJob,
    ReportParams,
    TargetReport,
    TargetReportList,
    TargetReportParams,
)

MODELS = (
    PlacementAdjustment,
    Bidding,
    Campaign,
    AdGroup,
    AdGroupEx,
    AdGroupParams,
    AdGroupResponse,
    SuggestedBid,
    AdGroupBidRecommendation,
    Keyword,
    CampaignNegativeKeyword,
    CampaignNegativeKeywordEx,
    ReportJob,
    ReportParams,
    CampaignReportParams,
    AdGroupReportParams,
    KeywordReportParams,
    ProductAdReportParams,
    TargetReportParams,
    AsinReportParams,
    CampaignReport,
    AdGroupReport,
    KeywordReport,
    ProductAdReport,
    TargetReport,
    AsinReport,
)

LISTS = (
    CampaignList,
    AdGroupList,
    AdGroupExList,
    AdGroupResponseList,
    KeywordList,
    CampaignNegativeKeywordList,
    CampaignNegativeKeywordExList,
    CampaignReportList,
    AdGroupReportList,
    KeywordReportList,
    ProductAdReportList,
    TargetReportList,
    AsinReportList,
)

registry = TypeRegistry(models=MODELS, lists=LISTS)
"""Registry used when no registry is passed to the hydration functions."""
