from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


# --- upstream (api.weather.gov /alerts) ---

class AlertProperties(BaseModel):
    model_config = ConfigDict(extra="ignore")

    event: Optional[str] = None
    areaDesc: Optional[str] = None
    severity: Optional[str] = None
    status: Optional[str] = None
    headline: Optional[str] = None


class AlertFeature(BaseModel):
    model_config = ConfigDict(extra="ignore")

    properties: AlertProperties = Field(default_factory=AlertProperties)


class AlertsPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    features: Optional[List[AlertFeature]] = None


# --- ours ---

class AlertRecord(BaseModel):
    event: str
    area: str
    severity: str
    status: str
    headline: str


class AlertsResponse(BaseModel):
    state: str
    alertCount: Optional[int] = None
    alerts: List[AlertRecord]
    message: Optional[str] = None
