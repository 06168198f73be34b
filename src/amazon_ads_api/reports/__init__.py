"""Sponsored Products report lifecycle.

Recommended import pattern:
    from amazon_ads_api.reports import submit_report, poll_report, download_and_decode_report
"""

from .pipeline import (
    decode_report,
    download_and_decode_report,
    download_report,
    poll_report,
    submit_report,
)
from .record_types import REPORT_LISTS, report_list_type, report_path
from .shortcuts import (
    download_ad_groups_report,
    download_asins_report,
    download_campaigns_report,
    download_keywords_report,
    download_product_ads_report,
    download_targets_report,
    request_ad_groups_report,
    request_asins_report,
    request_campaigns_report,
    request_keywords_report,
    request_product_ads_report,
    request_targets_report,
)

__all__ = [
    "submit_report",
    "poll_report",
    "download_report",
    "decode_report",
    "download_and_decode_report",
    "REPORT_LISTS",
    "report_list_type",
    "report_path",
    "request_campaigns_report",
    "request_ad_groups_report",
    "request_keywords_report",
    "request_product_ads_report",
    "request_asins_report",
    "request_targets_report",
    "download_campaigns_report",
    "download_ad_groups_report",
    "download_keywords_report",
    "download_product_ads_report",
    "download_asins_report",
    "download_targets_report",
]
