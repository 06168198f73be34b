"""Sponsored Products entity models and their list types.

Field names are the API's own camelCase names, so each one is also its
JSON key.
"""

from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import field_validator

from .base import ApiModel, ModelList
from .enums import (
    BiddingStrategy,
    CampaignType,
    MatchType,
    NegativeMatchType,
    PlacementPredicate,
    ServingStatus,
    State,
    TargetingType,
)


# Campaign Models
class PlacementAdjustment(ApiModel):
    predicate: Optional[PlacementPredicate] = None
    percentage: Optional[float] = None


class Bidding(ApiModel):
    """Campaign bidding strategy and placement bid adjustments."""

    strategy: Optional[BiddingStrategy] = None
    adjustments: Optional[List[PlacementAdjustment]] = None


class Campaign(ApiModel):
    """Sponsored Products campaign.

    :param campaignId: Campaign identifier
    :param name: Campaign name
    :param campaignType: Always ``sponsoredProducts`` for this API
    :param targetingType: ``manual`` or ``auto``
    :param state: Campaign state
    :param dailyBudget: Daily budget in the profile currency
    :param startDate: First serving day
    :param endDate: Last serving day, if any
    :param premiumBidAdjustment: Whether premium bid adjustment is on
    :param bidding: Bidding strategy and placement adjustments
    :param portfolioId: Owning portfolio, if any
    """

    campaignId: Optional[int] = None
    name: Optional[str] = None
    campaignType: Optional[CampaignType] = None
    targetingType: Optional[TargetingType] = None
    state: Optional[State] = None
    dailyBudget: Optional[float] = None
    startDate: Optional[date] = None
    endDate: Optional[date] = None
    premiumBidAdjustment: Optional[bool] = None
    bidding: Optional[Bidding] = None
    portfolioId: Optional[int] = None


class CampaignList(ModelList[Campaign]):
    item_model = Campaign


# Ad Group Models
class AdGroup(ApiModel):
    """Sponsored Products ad group, minimal field set.

    :param adGroupId: Ad group identifier, assigned on creation
    :param name: Ad group name
    :param campaignId: Parent campaign identifier
    :param defaultBid: Bid used for keywords without their own bid
    :param state: Ad group state
    """

    adGroupId: Optional[int] = None
    name: Optional[str] = None
    campaignId: Optional[int] = None
    defaultBid: Optional[float] = None
    state: Optional[State] = None


class AdGroupEx(AdGroup):
    """Ad group with read-only extended fields."""

    creationDate: Optional[datetime] = None
    lastUpdatedDate: Optional[datetime] = None
    servingStatus: Optional[ServingStatus] = None


class AdGroupResponse(ApiModel):
    """Per-entity acknowledgment of a create, update or archive call."""

    adGroupId: Optional[int] = None
    code: Optional[str] = None
    description: Optional[str] = None


class SuggestedBid(ApiModel):
    suggested: Optional[float] = None
    rangeStart: Optional[float] = None
    rangeEnd: Optional[float] = None


class AdGroupBidRecommendation(ApiModel):
    adGroupId: Optional[int] = None
    suggestedBid: Optional[SuggestedBid] = None


class AdGroupParams(ApiModel):
    """Query parameters for listing ad groups.

    Filters take a list or a comma-separated string.
    """

    startIndex: Optional[int] = None
    count: Optional[int] = None
    campaignType: Optional[CampaignType] = None
    campaignIdFilter: Optional[str] = None
    adGroupIdFilter: Optional[str] = None
    stateFilter: Optional[str] = None
    name: Optional[str] = None

    @field_validator("campaignIdFilter", "adGroupIdFilter", "stateFilter", mode="before")
    @classmethod
    def join_filter(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return ",".join(str(getattr(item, "value", item)) for item in v)
        return v


class AdGroupList(ModelList[AdGroup]):
    item_model = AdGroup


class AdGroupExList(ModelList[AdGroupEx]):
    item_model = AdGroupEx


class AdGroupResponseList(ModelList[AdGroupResponse]):
    item_model = AdGroupResponse


# Keyword Models
class Keyword(ApiModel):
    keywordId: Optional[int] = None
    campaignId: Optional[int] = None
    adGroupId: Optional[int] = None
    keywordText: Optional[str] = None
    matchType: Optional[MatchType] = None
    state: Optional[State] = None
    bid: Optional[float] = None


class KeywordList(ModelList[Keyword]):
    item_model = Keyword


class CampaignNegativeKeyword(ApiModel):
    """Negative keyword applied at campaign level."""

    keywordId: Optional[int] = None
    campaignId: Optional[int] = None
    keywordText: Optional[str] = None
    matchType: Optional[NegativeMatchType] = None
    state: Optional[State] = None


class CampaignNegativeKeywordEx(CampaignNegativeKeyword):
    creationDate: Optional[datetime] = None
    lastUpdatedDate: Optional[datetime] = None
    servingStatus: Optional[ServingStatus] = None


class CampaignNegativeKeywordList(ModelList[CampaignNegativeKeyword]):
    item_model = CampaignNegativeKeyword


class CampaignNegativeKeywordExList(ModelList[CampaignNegativeKeywordEx]):
    item_model = CampaignNegativeKeywordEx
