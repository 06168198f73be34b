"""Report jobs, report request parameters and report record models.

Record models hold one row of a downloaded report. Metric fields are only
present in the payload when they were requested, so every field defaults
to ``None``.
"""

from datetime import date
from typing import Any, Optional

from pydantic import field_validator

from ..exceptions import ReportFailedError, ReportNotReadyError
from .base import ApiModel, ModelList
from .enums import CampaignType, MatchType, ReportSegment, ReportStatus, State


# Report Job
class ReportJob(ApiModel):
    """Status of an asynchronous report job.

    Returned both when a report is requested and when its status is
    polled. ``location`` is only set once ``status`` is ``SUCCESS``.

    :param reportId: Opaque report identifier
    :param recordType: Record type echoed by the API (``campaign``, ...)
    :param status: Current job status
    :param statusDetails: Human-readable status description
    :param location: Download URL, set on success
    :param fileSize: Size of the compressed report in bytes
    """

    reportId: Optional[str] = None
    recordType: Optional[str] = None
    status: ReportStatus = ReportStatus.IN_PROGRESS
    statusDetails: Optional[str] = None
    location: Optional[str] = None
    fileSize: Optional[int] = None

    @property
    def is_terminal(self) -> bool:
        return self.status in (ReportStatus.SUCCESS, ReportStatus.FAILURE)

    @property
    def is_ready(self) -> bool:
        return self.status is ReportStatus.SUCCESS and bool(self.location)

    def require_location(self) -> str:
        """Return the download location of a finished report.

        :return: The report's download URL
        :raises ReportFailedError: If the report failed
        :raises ReportNotReadyError: If the report has not finished
        """
        if self.status is ReportStatus.FAILURE:
            raise ReportFailedError(
                f"Report {self.reportId} failed: {self.statusDetails}",
                report_id=self.reportId,
                status=self.status.value,
            )
        if not self.is_ready:
            raise ReportNotReadyError(
                f"Report {self.reportId} is not ready ({self.status.value})",
                report_id=self.reportId,
                status=self.status.value,
            )
        return self.location


# Request Parameters
class ReportParams(ApiModel):
    """Body of a report request.

    :param reportDate: Day to report on, sent as ``YYYYMMDD``
    :param metrics: Metric names; a list is joined with commas
    """

    reportDate: Optional[date] = None
    metrics: Optional[str] = None

    @field_validator("metrics", mode="before")
    @classmethod
    def join_metrics(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return ",".join(v)
        return v


class CampaignReportParams(ReportParams):
    pass


class AdGroupReportParams(ReportParams):
    pass


class ProductAdReportParams(ReportParams):
    pass


class KeywordReportParams(ReportParams):
    segment: Optional[ReportSegment] = None


class TargetReportParams(ReportParams):
    segment: Optional[ReportSegment] = None


class AsinReportParams(ReportParams):
    """ASIN reports must name the campaign type explicitly."""

    campaignType: CampaignType = CampaignType.SPONSORED_PRODUCTS


# Report Records
class PerformanceRecord(ApiModel):
    """Metrics shared by every performance report."""

    impressions: Optional[int] = None
    clicks: Optional[int] = None
    cost: Optional[float] = None
    attributedConversions1d: Optional[int] = None
    attributedConversions7d: Optional[int] = None
    attributedConversions14d: Optional[int] = None
    attributedConversions30d: Optional[int] = None
    attributedConversions1dSameSKU: Optional[int] = None
    attributedConversions7dSameSKU: Optional[int] = None
    attributedConversions14dSameSKU: Optional[int] = None
    attributedConversions30dSameSKU: Optional[int] = None
    attributedUnitsOrdered1d: Optional[int] = None
    attributedUnitsOrdered7d: Optional[int] = None
    attributedUnitsOrdered14d: Optional[int] = None
    attributedUnitsOrdered30d: Optional[int] = None
    attributedSales1d: Optional[float] = None
    attributedSales7d: Optional[float] = None
    attributedSales14d: Optional[float] = None
    attributedSales30d: Optional[float] = None
    attributedSales1dSameSKU: Optional[float] = None
    attributedSales7dSameSKU: Optional[float] = None
    attributedSales14dSameSKU: Optional[float] = None
    attributedSales30dSameSKU: Optional[float] = None


class CampaignReport(PerformanceRecord):
    campaignId: Optional[int] = None
    campaignName: Optional[str] = None
    campaignStatus: Optional[State] = None
    campaignBudget: Optional[float] = None


class AdGroupReport(PerformanceRecord):
    campaignId: Optional[int] = None
    campaignName: Optional[str] = None
    adGroupId: Optional[int] = None
    adGroupName: Optional[str] = None


class KeywordReport(PerformanceRecord):
    campaignId: Optional[int] = None
    campaignName: Optional[str] = None
    adGroupId: Optional[int] = None
    adGroupName: Optional[str] = None
    keywordId: Optional[int] = None
    keywordText: Optional[str] = None
    matchType: Optional[MatchType] = None
    query: Optional[str] = None


class ProductAdReport(PerformanceRecord):
    campaignId: Optional[int] = None
    campaignName: Optional[str] = None
    adGroupId: Optional[int] = None
    adGroupName: Optional[str] = None
    adId: Optional[int] = None
    asin: Optional[str] = None
    sku: Optional[str] = None
    currency: Optional[str] = None


class TargetReport(PerformanceRecord):
    campaignId: Optional[int] = None
    campaignName: Optional[str] = None
    adGroupId: Optional[int] = None
    adGroupName: Optional[str] = None
    targetId: Optional[int] = None
    targetingExpression: Optional[str] = None
    targetingText: Optional[str] = None
    targetingType: Optional[str] = None
    query: Optional[str] = None


class AsinReport(ApiModel):
    """Row of an ASIN report: sales of ASINs other than the advertised one."""

    campaignId: Optional[int] = None
    campaignName: Optional[str] = None
    adGroupId: Optional[int] = None
    adGroupName: Optional[str] = None
    keywordId: Optional[int] = None
    keywordText: Optional[str] = None
    matchType: Optional[MatchType] = None
    asin: Optional[str] = None
    otherAsin: Optional[str] = None
    sku: Optional[str] = None
    currency: Optional[str] = None
    attributedUnitsOrdered1dOtherSKU: Optional[int] = None
    attributedUnitsOrdered7dOtherSKU: Optional[int] = None
    attributedUnitsOrdered14dOtherSKU: Optional[int] = None
    attributedUnitsOrdered30dOtherSKU: Optional[int] = None
    attributedSales1dOtherSKU: Optional[float] = None
    attributedSales7dOtherSKU: Optional[float] = None
    attributedSales14dOtherSKU: Optional[float] = None
    attributedSales30dOtherSKU: Optional[float] = None


class CampaignReportList(ModelList[CampaignReport]):
    item_model = CampaignReport


class AdGroupReportList(ModelList[AdGroupReport]):
    item_model = AdGroupReport


class KeywordReportList(ModelList[KeywordReport]):
    item_model = KeywordReport


class ProductAdReportList(ModelList[ProductAdReport]):
    item_model = ProductAdReport


class TargetReportList(ModelList[TargetReport]):
    item_model = TargetReport


class AsinReportList(ModelList[AsinReport]):
    item_model = AsinReport
