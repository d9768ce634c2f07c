"""Edge Trigger and Navigation tests.

Tests cover:
    - EdgeTrigger fires once per crossing, not while the sentinel stays visible
    - EdgeTrigger fires again after leaving and re-entering, and after rearm()
    - rising() reports a crossing without recording it
    - weather_path templates /weather/<name> and encodes the name
"""

from city_search.core.edge_trigger import EdgeTrigger
from city_search.core.navigation import weather_path


def test_edge_fires_on_first_crossing():
    trigger = EdgeTrigger()
    assert trigger.observe(True) is True


def test_edge_does_not_fire_while_level_stays_high():
    trigger = EdgeTrigger()
    trigger.observe(True)
    assert trigger.observe(True) is False
    assert trigger.observe(True) is False


def test_edge_fires_again_after_leaving():
    trigger = EdgeTrigger()
    trigger.observe(True)
    assert trigger.observe(False) is False
    assert trigger.observe(True) is True


def test_edge_never_fires_while_low():
    trigger = EdgeTrigger()
    assert trigger.observe(False) is False


def test_rearm_allows_next_crossing():
    trigger = EdgeTrigger()
    trigger.observe(True)
    trigger.rearm()
    assert trigger.observe(True) is True


def test_rising_does_not_record():
    trigger = EdgeTrigger()
    assert trigger.rising(True) is True
    assert trigger.near_end is False
    assert trigger.rising(False) is False


def test_weather_path_simple_name():
    assert weather_path("London") == "/weather/London"


def test_weather_path_encodes_spaces_and_slashes():
    assert weather_path("New York") == "/weather/New%20York"
    assert weather_path("A/B") == "/weather/A%2FB"


def test_weather_path_custom_prefix():
    assert weather_path("Paris", "/forecast") == "/forecast/Paris"
