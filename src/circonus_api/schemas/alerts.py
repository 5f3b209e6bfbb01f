from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from circonus_api.schemas.common import epoch_to_utc


class Alert(BaseModel):
    """An alert as returned by the /alert endpoint. Every field may be absent."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    cid: Optional[str] = Field(default=None, description="Alert CID, e.g. /alert/1234.", alias="_cid")
    acknowledgement_cid: Optional[str] = Field(
        default=None, description="Acknowledgement CID if the alert was acknowledged.", alias="_acknowledgement"
    )
    alert_url: Optional[str] = Field(default=None, description="UI link to the alert.", alias="_alert_url")
    broker_cid: Optional[str] = Field(default=None, description="Broker CID.", alias="_broker")
    check_cid: Optional[str] = Field(default=None, description="Check CID.", alias="_check")
    check_name: Optional[str] = Field(default=None, description="Check display name.", alias="_check_name")

    cleared_on: Optional[int] = Field(default=None, description="Epoch seconds when cleared.", alias="_cleared_on")
    cleared_value: Optional[str] = Field(default=None, description="Metric value at clear time.", alias="_cleared_value")

    maintenance: List[str] = Field(
        default_factory=list, description="Maintenance window CIDs in effect.", alias="_maintenance"
    )

    metric_link_url: Optional[str] = Field(default=None, description="Metric documentation link.", alias="_metric_link")
    metric_name: Optional[str] = Field(default=None, description="Metric name.", alias="_metric_name")
    metric_notes: Optional[str] = Field(default=None, description="Free-text metric notes.", alias="_metric_notes")

    occurred_on: Optional[int] = Field(default=None, description="Epoch seconds when raised.", alias="_occurred_on")
    rule_set_cid: Optional[str] = Field(default=None, description="Rule set CID.", alias="_rule_set")
    severity: Optional[int] = Field(default=None, ge=0, description="Severity (1 is highest).", alias="_severity")
    tags: List[str] = Field(default_factory=list, description="Tags, e.g. 'cat:tag'.", alias="_tags")
    value: Optional[str] = Field(default=None, description="Metric value that raised the alert.", alias="_value")

    @property
    def occurred_at(self) -> Optional[datetime]:
        return epoch_to_utc(self.occurred_on)

    @property
    def cleared_at(self) -> Optional[datetime]:
        return epoch_to_utc(self.cleared_on)

    @property
    def is_cleared(self) -> bool:
        return self.cleared_on is not None


# PUBLIC_INTERFACE
def new_alert() -> Alert:
    """Return an empty Alert."""
    return Alert()
