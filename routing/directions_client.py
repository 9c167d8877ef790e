#Purpose: The directions-service "adapter/client".
#Sole responsibility: talk to the Google Directions endpoint via HTTP and return the JSON body.
#Encapsulates service-specific details:
#coordinate formatting (lat,lng)
#query params (origin, destination, key, alternatives)
#timeouts and transport/status error handling
#It should not decode polylines or build Route objects (see route_fetcher.py).


from dotenv import load_dotenv
import logging
import os
from typing import Any, Dict, Optional
import requests

from geometry import Coordinate

# Read directions settings from environment
# Example in .env:
# GOOGLE_MAPS_KEY=your-key
# DIRECTIONS_URL=https://maps.googleapis.com/maps/api/directions/json
load_dotenv()
GOOGLE_MAPS_KEY = os.getenv("GOOGLE_MAPS_KEY")
DIRECTIONS_URL = os.getenv("DIRECTIONS_URL", "https://maps.googleapis.com/maps/api/directions/json")
DIRECTIONS_TIMEOUT = float(os.getenv("DIRECTIONS_TIMEOUT", "10"))

# statuses that carry a well-formed (possibly empty) routes array
OK_STATUSES = ("OK", "ZERO_RESULTS")

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when routes cannot be fetched or the response has the wrong shape."""
    pass


class DirectionsClient:
    """
    Directions Adapter / Client

    Sole responsibility:
    - Talk to the directions endpoint via HTTP
    - Convert Coordinate -> 'lat,lng' query params
    - Return the raw JSON payload, or raise FetchError
    """
    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None, timeout: float = DIRECTIONS_TIMEOUT):
        self.api_key = api_key or GOOGLE_MAPS_KEY
        self.base_url = base_url or DIRECTIONS_URL
        self.timeout = timeout #seconds to wait for the directions service before giving up

        if not self.api_key:
            raise ValueError("Directions API key not set. Please set GOOGLE_MAPS_KEY in the .env file.")

    def build_params(self, origin: Coordinate, destination: Coordinate) -> Dict[str, str]:
        return {
            "origin": origin.as_query(),
            "destination": destination.as_query(),
            "key": self.api_key,
            "alternatives": "true", #ask for alternative routes, not just the fastest
        }

    def get_directions(self, origin: Coordinate, destination: Coordinate) -> Dict[str, Any]:
        """
        Calls the directions endpoint and returns the JSON body.

        Raises:
            FetchError on transport failure, HTTP error status,
            non-JSON body or a service status other than OK / ZERO_RESULTS.
        """
        try:
            response = requests.get(
                self.base_url,
                params=self.build_params(origin, destination),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise FetchError(f"Directions request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise FetchError("Directions response is not valid JSON") from e

        if not isinstance(data, dict):
            raise FetchError("Directions response is not a JSON object")

        status = data.get("status", "OK")
        if status not in OK_STATUSES:
            raise FetchError(f"Directions error: {status} {data.get('error_message', '')}".strip())

        logger.debug(f"Directions {origin} -> {destination}: status {status}")
        return data
