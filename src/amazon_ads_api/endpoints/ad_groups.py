"""Sponsored Products ad group endpoints.

Each function takes the transport explicitly, issues one call and hydrates
the decoded body into the matching model or list type.
"""

import logging
from typing import Any, Iterable, List, Optional, Union

from ..hydration import hydrate, hydrate_list
from ..models.entities import (
    AdGroup,
    AdGroupBidRecommendation,
    AdGroupEx,
    AdGroupExList,
    AdGroupList,
    AdGroupParams,
    AdGroupResponse,
    AdGroupResponseList,
)
from ..utils.http import Transport, decode_json

logger = logging.getLogger(__name__)

AdGroups = Union[AdGroupList, Iterable[AdGroup]]


def _body(ad_groups: AdGroups) -> List[dict]:
    if isinstance(ad_groups, AdGroupList):
        return ad_groups.to_list()
    return AdGroupList(ad_groups).to_list()


def _query(params: Optional[AdGroupParams]) -> Optional[dict]:
    return params.to_dict() if params is not None else None


async def _call(
    transport: Transport,
    method: str,
    path: str,
    params: Optional[dict] = None,
    body: Any = None,
) -> Any:
    url = transport.build_url(path, params)
    response = await transport.execute(method, url, body)
    return decode_json(response, url)


async def get_ad_group(transport: Transport, ad_group_id: int) -> AdGroup:
    """Retrieve an ad group by ID.

    Returns the minimal field set; cheaper than :func:`get_ad_group_ex`.
    """
    return hydrate(AdGroup, await _call(transport, "GET", f"sp/adGroups/{ad_group_id}"))


async def get_ad_group_ex(transport: Transport, ad_group_id: int) -> AdGroupEx:
    """Retrieve an ad group with its read-only extended fields."""
    data = await _call(transport, "GET", f"sp/adGroups/extended/{ad_group_id}")
    return hydrate(AdGroupEx, data)


async def create_ad_groups(
    transport: Transport, ad_groups: AdGroups
) -> AdGroupResponseList:
    """Create one or more ad groups.

    The response holds one acknowledgment per ad group, in request order;
    created ad groups carry their new ``adGroupId``.
    """
    body = _body(ad_groups)
    logger.debug(f"Creating {len(body)} ad groups")
    data = await _call(transport, "POST", "sp/adGroups", body=body)
    return hydrate_list(AdGroupResponseList, data)


async def update_ad_groups(
    transport: Transport, ad_groups: AdGroups
) -> AdGroupResponseList:
    """Update one or more ad groups, identified by ``adGroupId``."""
    data = await _call(transport, "PUT", "sp/adGroups", body=_body(ad_groups))
    return hydrate_list(AdGroupResponseList, data)


async def archive_ad_group(transport: Transport, ad_group_id: int) -> AdGroupResponse:
    """Set an ad group to archived. Archived entities cannot be re-enabled."""
    data = await _call(transport, "DELETE", f"sp/adGroups/{ad_group_id}")
    return hydrate(AdGroupResponse, data)


async def list_ad_groups(
    transport: Transport, params: Optional[AdGroupParams] = None
) -> AdGroupList:
    data = await _call(transport, "GET", "sp/adGroups", params=_query(params))
    return hydrate_list(AdGroupList, data)


async def list_ad_groups_ex(
    transport: Transport, params: Optional[AdGroupParams] = None
) -> AdGroupExList:
    data = await _call(transport, "GET", "sp/adGroups/extended", params=_query(params))
    return hydrate_list(AdGroupExList, data)


async def get_ad_group_bid_recommendations(
    transport: Transport, ad_group_id: int
) -> AdGroupBidRecommendation:
    """Retrieve the suggested default bid for an ad group."""
    data = await _call(transport, "GET", f"adGroups/{ad_group_id}/bidRecommendations")
    return hydrate(AdGroupBidRecommendation, data)
