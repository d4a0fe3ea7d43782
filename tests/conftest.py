import json
from unittest.mock import Mock

import pytest

from slotutils.config import ClientConfig

BASE = "https://cdn-api.test"


def make_response(payload, status_code=200):
    """Fake requests.Response carrying payload as its body."""
    body = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
    return Mock(content=body, status_code=status_code)


@pytest.fixture
def config():
    return ClientConfig(base_url=BASE)


@pytest.fixture
def states_payload():
    return {
        "states": [
            {"state_id": 1, "state_name": "Andaman and Nicobar Islands"},
            {"state_id": 17, "state_name": "Kerala"},
            {"state_id": 21, "state_name": "Maharashtra"},
        ],
        "ttl": 24,
    }


@pytest.fixture
def districts_payload():
    return {
        "districts": [
            {"district_id": 301, "district_name": "Alappuzha"},
            {"district_id": 307, "district_name": "Ernakulam"},
        ],
        "ttl": 24,
    }


@pytest.fixture
def slots_payload():
    return {
        "centers": [
            {
                "center_id": 1234,
                "name": "District General Hospital",
                "state_name": "Kerala",
                "district_name": "Ernakulam",
                "block_name": "Aluva",
                "pincode": 683101,
                "lat": 10,
                "long": 76,
                "from": "09:00:00",
                "to": "17:00:00",
                "fee_type": "Free",
                "sessions": [
                    {
                        "session_id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                        "date": "16-10-2026",
                        "available_capacity": 50,
                        "min_age_limit": 18,
                        "vaccine": "COVISHIELD",
                        "slots": ["FORENOON", "AFTERNOON"],
                    },
                    {
                        "session_id": "4ab85f64-5717-4562-b3fc-2c963f66afa7",
                        "date": "17-10-2026",
                        "available_capacity": 0,
                        "min_age_limit": 45,
                        "vaccine": "COVAXIN",
                        "slots": ["FORENOON"],
                    },
                ],
            },
            {
                "center_id": 5678,
                "name": "PHC Kalamassery",
                "state_name": "Kerala",
                "district_name": "Ernakulam",
                "block_name": "Kalamassery",
                "pincode": "683104",
                "lat": 10,
                "long": 76,
                "from": "10:00:00",
                "to": "16:00:00",
                "fee_type": "Paid",
                "sessions": [
                    {
                        "session_id": "5bc85f64-5717-4562-b3fc-2c963f66afa8",
                        "date": "18-10-2026",
                        "min_age_limit": 18,
                    },
                ],
            },
        ]
    }
