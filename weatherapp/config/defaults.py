"""Default named locations."""

from weatherapp.config.schema import LocationConfig

DEFAULT_LOCATIONS: list[LocationConfig] = [
    LocationConfig(
        name="Sydney",
        slug="sydney",
        latitude=-33.8688,
        longitude=151.2093,
        admin_area="NSW",
    ),
    LocationConfig(
        name="Melbourne",
        slug="melbourne",
        latitude=-37.8136,
        longitude=144.9631,
        admin_area="VIC",
    ),
    LocationConfig(
        name="Brisbane",
        slug="brisbane",
        latitude=-27.4698,
        longitude=153.0251,
        admin_area="QLD",
    ),
    LocationConfig(
        name="Perth",
        slug="perth",
        latitude=-31.9523,
        longitude=115.8613,
        admin_area="WA",
    ),
]
