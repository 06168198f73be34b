"""Binding of report record types to their decode schema.

One :class:`ReportRecordType` member decides two things: the submission
path and the list type its rows hydrate into. The table below is the only
place the second decision is made; a new record kind needs one entry here
plus its record and list models.
"""

from types import MappingProxyType
from typing import Mapping, Type

from ..exceptions import TypeResolutionError
from ..models.base import ModelList
from ..models.enums import ReportRecordType
from ..models.reports import (
    AdGroupReportList,
    AsinReportList,
    CampaignReportList,
    KeywordReportList,
    ProductAdReportList,
    TargetReportList,
)

REPORT_LISTS: Mapping[ReportRecordType, Type[ModelList]] = MappingProxyType(
    {
        ReportRecordType.CAMPAIGNS: CampaignReportList,
        ReportRecordType.AD_GROUPS: AdGroupReportList,
        ReportRecordType.KEYWORDS: KeywordReportList,
        ReportRecordType.PRODUCT_ADS: ProductAdReportList,
        ReportRecordType.ASINS: AsinReportList,
        ReportRecordType.TARGETS: TargetReportList,
    }
)


def report_path(record_type: ReportRecordType) -> str:
    """Path used to request a report of ``record_type``."""
    return f"sp/{ReportRecordType(record_type).value}/report"


def report_list_type(record_type: ReportRecordType) -> Type[ModelList]:
    """List type that rows of ``record_type`` hydrate into.

    :raises TypeResolutionError: If the record type has no binding
    """
    try:
        return REPORT_LISTS[ReportRecordType(record_type)]
    except (KeyError, ValueError):
        raise TypeResolutionError(
            f"No report list bound to record type {record_type!r}",
            type_name=str(record_type),
        ) from None
