import datetime
import json
import logging
import re

from slotutils.config import ClientConfig
from slotutils.errors import DecodeError
from slotutils.models import Center, Session, SlotsResponse
from slotutils.request import fetch
from slotutils.urls import CALENDAR_URL_DISTRICT, DISTRICTS_URL, STATES_URL

logger = logging.getLogger(__name__)

NUMBER_REGEX = re.compile(r"-?(0|[1-9]\d*)(\.\d+)?([eE][+-]?\d+)?\Z")
DATE_FORMAT = "%d-%m-%Y"


class NumberText(str):
    """Literal text of a JSON number that is not an integer."""
    pass


def _reject_constant(name):
    raise ValueError(f"invalid JSON number {name}")


def loadJson(body):
    # floats are kept as their literal text so no precision is lost
    try:
        payload = json.loads(
            body, parse_float=NumberText, parse_constant=_reject_constant
        )
    except ValueError as e:
        raise DecodeError(f"Response is not valid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise DecodeError(f"Expected a JSON object, got {type(payload).__name__}")
    return payload


def getInt(obj, key):
    value = obj.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"'{key}' must be an integer, got {value!r}")
    return value


def getStr(obj, key):
    value = obj.get(key)
    if value is None:
        return ""
    if type(value) is not str:
        raise DecodeError(f"'{key}' must be a string, got {value!r}")
    return value


def getNumberText(obj, key):
    """
    Numeric fields such as pincode may arrive as a number or as a quoted
    number. Either way they are returned as decimal text, "" when absent.
    """
    value = obj.get(key)
    if value is None:
        return ""
    if isinstance(value, bool):
        raise DecodeError(f"'{key}' must be a number, got {value!r}")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str) and NUMBER_REGEX.match(value):
        return str(value)
    raise DecodeError(f"'{key}' must be a number, got {value!r}")


def getList(obj, key):
    value = obj.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise DecodeError(f"'{key}' must be a list, got {value!r}")
    return value


def getStrings(obj, key):
    items = getList(obj, key)
    for item in items:
        if type(item) is not str:
            raise DecodeError(f"'{key}' must only contain strings, got {item!r}")
    return items


def getObjects(obj, key):
    items = getList(obj, key)
    for item in items:
        if not isinstance(item, dict):
            raise DecodeError(f"'{key}' must only contain objects, got {item!r}")
    return items


def getNameMap(payload, key, name_key, id_key):
    # duplicate names keep the id of the last occurrence
    mapping = {}
    for item in getObjects(payload, key):
        mapping[getStr(item, name_key)] = getInt(item, id_key)
    return mapping


def fetchStates(config=None):
    """
    This function
        1. Fetches the list of states, and
        2. Returns it as a dict of state name to state id
    """
    config = config or ClientConfig()
    body = fetch(STATES_URL.format(config.base_url), config)
    states = getNameMap(loadJson(body), "states", "state_name", "state_id")
    logger.debug(f"Fetched {len(states)} states")
    return states


def fetchDistricts(state_id, config=None):
    """
    This function
        1. Fetches the districts of the given state, and
        2. Returns them as a dict of district name to district id
    """
    config = config or ClientConfig()
    body = fetch(DISTRICTS_URL.format(config.base_url, state_id), config)
    districts = getNameMap(loadJson(body), "districts", "district_name", "district_id")
    logger.debug(f"Fetched {len(districts)} districts for state_id {state_id}")
    return districts


def parseSession(session):
    return Session(
        session_id=getStr(session, "session_id"),
        date=getStr(session, "date"),
        min_age_limit=getNumberText(session, "min_age_limit"),
        available_capacity=getNumberText(session, "available_capacity"),
        vaccine=getStr(session, "vaccine"),
        slots=getStrings(session, "slots"),
    )


def parseCenter(center):
    return Center(
        center_id=getInt(center, "center_id"),
        name=getStr(center, "name"),
        state_name=getStr(center, "state_name"),
        district_name=getStr(center, "district_name"),
        block_name=getStr(center, "block_name"),
        pincode=getNumberText(center, "pincode"),
        lat=getNumberText(center, "lat"),
        long=getNumberText(center, "long"),
        from_time=getStr(center, "from"),
        to_time=getStr(center, "to"),
        fee_type=getStr(center, "fee_type"),
        sessions=[parseSession(s) for s in getObjects(center, "sessions")],
    )


def fetchSlots(district_id, config=None, date=None):
    """
    This function
        1. Fetches the 7 day calendar of the district starting at date
           (today when not given), and
        2. Returns the centers with their sessions in response order
    """
    config = config or ClientConfig()
    if date is None:
        date = datetime.date.today().strftime(DATE_FORMAT)
    body = fetch(CALENDAR_URL_DISTRICT.format(config.base_url, district_id, date), config)
    payload = loadJson(body)
    slots = SlotsResponse(centers=[parseCenter(c) for c in getObjects(payload, "centers")])
    logger.debug(
        f"Fetched {len(slots.centers)} centers, {slots.session_count} sessions for district_id {district_id} on {date}"
    )
    return slots
