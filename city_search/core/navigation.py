"""Navigation - path of the weather page opened when a city is chosen."""

from urllib.parse import quote

DEFAULT_WEATHER_PREFIX = "/weather"


def weather_path(city_name: str, prefix: str = DEFAULT_WEATHER_PREFIX) -> str:
    """Build /weather/<city name>, percent-encoding the name as one path segment."""
    return f"{prefix}/{quote(city_name, safe='')}"
