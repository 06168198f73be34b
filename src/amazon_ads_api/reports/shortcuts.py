"""Per-record-type report calls.

Thin wrappers over :mod:`.pipeline` that fix the record type, so call
sites read ``await request_keywords_report(transport, params)``.
"""

from typing import Union

from ..models.enums import ReportRecordType
from ..models.reports import (
    AdGroupReportList,
    AdGroupReportParams,
    AsinReportList,
    AsinReportParams,
    CampaignReportList,
    CampaignReportParams,
    KeywordReportList,
    KeywordReportParams,
    ProductAdReportList,
    ProductAdReportParams,
    ReportJob,
    TargetReportList,
    TargetReportParams,
)
from ..utils.http import Transport
from .pipeline import download_and_decode_report, submit_report

Location = Union[str, ReportJob]


async def request_campaigns_report(
    transport: Transport, params: CampaignReportParams
) -> ReportJob:
    return await submit_report(transport, ReportRecordType.CAMPAIGNS, params)


async def request_ad_groups_report(
    transport: Transport, params: AdGroupReportParams
) -> ReportJob:
    return await submit_report(transport, ReportRecordType.AD_GROUPS, params)


async def request_keywords_report(
    transport: Transport, params: KeywordReportParams
) -> ReportJob:
    return await submit_report(transport, ReportRecordType.KEYWORDS, params)


async def request_product_ads_report(
    transport: Transport, params: ProductAdReportParams
) -> ReportJob:
    return await submit_report(transport, ReportRecordType.PRODUCT_ADS, params)


async def request_asins_report(
    transport: Transport, params: AsinReportParams
) -> ReportJob:
    return await submit_report(transport, ReportRecordType.ASINS, params)


async def request_targets_report(
    transport: Transport, params: TargetReportParams
) -> ReportJob:
    return await submit_report(transport, ReportRecordType.TARGETS, params)


async def download_campaigns_report(
    transport: Transport, location: Location
) -> CampaignReportList:
    return await download_and_decode_report(
        transport, location, ReportRecordType.CAMPAIGNS
    )


async def download_ad_groups_report(
    transport: Transport, location: Location
) -> AdGroupReportList:
    return await download_and_decode_report(
        transport, location, ReportRecordType.AD_GROUPS
    )


async def download_keywords_report(
    transport: Transport, location: Location
) -> KeywordReportList:
    return await download_and_decode_report(
        transport, location, ReportRecordType.KEYWORDS
    )


async def download_product_ads_report(
    transport: Transport, location: Location
) -> ProductAdReportList:
    return await download_and_decode_report(
        transport, location, ReportRecordType.PRODUCT_ADS
    )


async def download_asins_report(
    transport: Transport, location: Location
) -> AsinReportList:
    return await download_and_decode_report(
        transport, location, ReportRecordType.ASINS
    )


async def download_targets_report(
    transport: Transport, location: Location
) -> TargetReportList:
    return await download_and_decode_report(
        transport, location, ReportRecordType.TARGETS
    )
