from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Session:
    session_id: str
    date: str
    min_age_limit: str
    available_capacity: str = ""
    vaccine: str = ""
    slots: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Center:
    center_id: int
    name: str
    state_name: str
    district_name: str
    block_name: str
    pincode: str
    lat: str = ""
    long: str = ""
    from_time: str = ""
    to_time: str = ""
    fee_type: str = ""
    sessions: List[Session] = field(default_factory=list)


@dataclass(frozen=True)
class SlotsResponse:
    centers: List[Center] = field(default_factory=list)

    @property
    def session_count(self):
        return sum(len(center.sessions) for center in self.centers)
