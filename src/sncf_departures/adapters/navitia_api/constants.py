"""Constants for the SNCF (Navitia) API adapter.

API Documentation: https://doc.navitia.io/
The API key is sent as the user name of HTTP basic auth.
"""

SNCF_BASE_URL = "https://api.sncf.com/v1/coverage/sncf"
PLACES_PATH = "places"  # GET /places?q=...&type[]=stop_area
JOURNEYS_PATH = "journeys"  # GET /journeys?from=...&to=...&datetime=...

# Navitia date-times are local to the coverage, without offset
NAVITIA_DATETIME_FORMAT = "%Y%m%dT%H%M%S"
NAVITIA_TIMEZONE = "Europe/Paris"
DISPLAY_DATE_FORMAT = "%Y-%m-%d"

# Navitia answers 404 with one of these error ids when no journey exists
NO_SOLUTION_ERROR_IDS = frozenset({"no_solution", "date_out_of_bounds"})

DEFAULT_HEADERS = {
    "Accept": "application/json",
}
