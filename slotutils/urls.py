BASE_URL = "https://cdn-api.co-vin.in"

STATES_URL = "{0}/api/v2/admin/location/states"
DISTRICTS_URL = "{0}/api/v2/admin/location/districts/{1}"
CALENDAR_URL_DISTRICT = "{0}/api/v2/appointment/sessions/calendarByDistrict?district_id={1}&date={2}"
