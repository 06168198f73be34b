"""Asynchronous report lifecycle: request, poll, download, decode.

A report job moves IN_PROGRESS -> SUCCESS | FAILURE on the server. This
module only issues the calls; the caller decides how often to poll and
whether to retry anything that fails.

Typical use:

    job = await submit_report(transport, ReportRecordType.CAMPAIGNS, params)
    while not job.is_terminal:
        await asyncio.sleep(interval)
        job = await poll_report(transport, job)
    rows = await download_and_decode_report(transport, job, ReportRecordType.CAMPAIGNS)
"""

import gzip
import json
import logging
import zlib
from typing import Optional, Union

from ..exceptions import ReportDecodeError, ReportDecompressionError
from ..hydration import TypeRegistry, hydrate, hydrate_list
from ..models.base import ModelList
from ..models.enums import ReportRecordType
from ..models.reports import ReportJob, ReportParams
from ..utils.http import Transport, decode_json
from ..utils.http.transport import PREVIEW_BYTES
from .record_types import report_list_type, report_path

logger = logging.getLogger(__name__)


async def submit_report(
    transport: Transport,
    record_type: ReportRecordType,
    params: Optional[ReportParams] = None,
) -> ReportJob:
    """Request a report.

    :param transport: Transport used for the call
    :param record_type: Kind of report to generate
    :param params: Report date, metrics and type-specific options
    :return: The new job, normally ``IN_PROGRESS``
    :raises TransportError: If the request fails
    """
    record_type = ReportRecordType(record_type)
    url = transport.build_url(report_path(record_type))
    body = params.to_dict() if params is not None else {}
    response = await transport.execute("POST", url, body)
    job = hydrate(ReportJob, decode_json(response, url))
    logger.info(
        f"Requested {record_type.value} report {job.reportId}: {job.status.value}"
    )
    return job


async def poll_report(
    transport: Transport, report: Union[str, ReportJob]
) -> ReportJob:
    """Fetch the current status of a report job.

    A job already in a terminal state is returned as-is without a call:
    SUCCESS and FAILURE never change once observed.

    :param transport: Transport used for the call
    :param report: Report ID or a previously returned job
    :return: The job's current state
    :raises TransportError: If the request fails
    """
    if isinstance(report, ReportJob):
        if report.is_terminal:
            logger.debug(
                f"Report {report.reportId} already {report.status.value}, not polling"
            )
            return report
        report_id = report.reportId
    else:
        report_id = report

    url = transport.build_url(f"reports/{report_id}")
    response = await transport.execute("GET", url)
    job = hydrate(ReportJob, decode_json(response, url))
    logger.debug(f"Report {report_id} status: {job.status.value}")
    return job


async def download_report(
    transport: Transport, location: Union[str, ReportJob]
) -> bytes:
    """Download the raw, still compressed report payload.

    :param transport: Transport used for the call
    :param location: Download URL, or a finished job
    :return: The payload bytes
    :raises ReportNotReadyError: If given a job that has not succeeded
    :raises ReportFailedError: If given a job that failed
    :raises TransportError: If the download fails
    """
    if isinstance(location, ReportJob):
        location = location.require_location()
    response = await transport.execute("GET", transport.build_url(location))
    logger.debug(f"Downloaded {len(response.content)} bytes from {location}")
    return response.content


def decode_report(
    raw: bytes,
    record_type: ReportRecordType,
    registry: Optional[TypeRegistry] = None,
) -> ModelList:
    """Decompress and hydrate a downloaded report.

    :param raw: Gzip-compressed UTF-8 JSON array of records
    :param record_type: Record type the report was requested with
    :param registry: Registry to resolve against (default: package registry)
    :return: The report rows, in payload order
    :raises ReportDecompressionError: If ``raw`` is not gzip data
    :raises ReportDecodeError: If the decompressed data is not UTF-8 JSON
    :raises TypeMismatch: If the payload is not a JSON array
    :raises ListElementError: If a row fails hydration
    """
    list_type = report_list_type(record_type)

    # gzip.decompress accepts an empty input and returns no data
    if not raw:
        raise ReportDecompressionError("Report payload is empty", size=0)

    try:
        data = gzip.decompress(raw)
    except (OSError, EOFError, zlib.error) as e:
        logger.warning(
            f"Report payload of {len(raw)} bytes is not valid gzip data: {e}"
        )
        raise ReportDecompressionError(
            f"Report payload is not valid gzip data: {e}",
            size=len(raw),
            preview=raw[:PREVIEW_BYTES].decode("utf-8", "replace"),
        ) from e

    try:
        payload = json.loads(data.decode("utf-8"))
    except ValueError as e:
        logger.warning(f"Decompressed report is not valid JSON: {e}")
        raise ReportDecodeError(f"Decompressed report is not valid JSON: {e}") from e

    return hydrate_list(list_type, payload, registry=registry)


async def download_and_decode_report(
    transport: Transport,
    location: Union[str, ReportJob],
    record_type: ReportRecordType,
    registry: Optional[TypeRegistry] = None,
) -> ModelList:
    """Download a finished report and hydrate its rows.

    :param transport: Transport used for the download
    :param location: Download URL, or a finished job
    :param record_type: Record type the report was requested with
    :param registry: Registry to resolve against (default: package registry)
    :return: The report rows, in payload order
    """
    raw = await download_report(transport, location)
    return decode_report(raw, record_type, registry=registry)
