"""Constants for the Mobilités M API adapter.

The Mobilités M open data API serves the Grenoble network: an OpenTripPlanner
router for itineraries and an index of routes, stops and stop times.
"""

# Paths relative to AppConfig.mobilites_base_url
PLAN_PATH = "/routers/default/plan"  # GET ?fromPlace=lat,lon&toPlace=lat,lon&mode=...
ROUTE_STOPS_PATH = "/routers/default/index/routes/{route_id}/stops"
STOP_TIMES_PATH = "/routers/default/index/stops/{stop_code}/stoptimes"

API_NAME = "mobilites_api"

# Minimum delay between requests to the API (in seconds)
MIN_DELAY_SECONDS = 0.1
