"""Record Normalizer - turns a decoded search body into ResultRecords.

Invariants:
    - A body without a `records` list raises DecodeError (the whole page fails)
    - A malformed element is skipped and logged; the rest of the page survives
    - Output order equals response order
"""

import logging
from typing import Any

from pydantic import ValidationError

from city_search.core.domain_types import ResultRecord
from city_search.core.errors import DecodeError, MalformedRecordError
from city_search.schemas.opendatasoft import CityRecord, SearchPayload

logger = logging.getLogger(__name__)


def parse_record(raw: Any) -> ResultRecord:
    """Validate one element of `records`. Raises MalformedRecordError."""
    try:
        record = CityRecord.model_validate(raw)
    except ValidationError as e:
        record_id = raw.get("recordid") if isinstance(raw, dict) else None
        reason = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise MalformedRecordError(
            record_id if isinstance(record_id, str) else None, reason,
        )
    fields = record.fields
    return ResultRecord(
        id=record.recordid,
        name=fields.name,
        country_name=fields.cou_name_en,
        population=fields.population,
        timezone=fields.timezone,
        coordinates=fields.coordinates,
    )


def normalize_page(body: Any) -> list[ResultRecord]:
    """Validate a page body and keep every well-formed record."""
    try:
        payload = SearchPayload.model_validate(body)
    except ValidationError as e:
        raise DecodeError(f"missing or invalid 'records' array ({e.error_count()} errors)")

    records: list[ResultRecord] = []
    for raw in payload.records:
        try:
            records.append(parse_record(raw))
        except MalformedRecordError as e:
            logger.warning(
                f"Skipping malformed record: {e.reason}",
                extra={"error_code": e.code},
            )
    return records
