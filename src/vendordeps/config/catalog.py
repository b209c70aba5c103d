"""Remote catalog configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime

from .env import optional_env_var, optional_float_env_var, optional_int_env_var
from .errors import ConfigurationError
from .http_resilience import RateLimit, ResilienceConfig

DEFAULT_CATALOG_URL_TEMPLATE = (
    "https://raw.githubusercontent.com/jasondaming/vendor-json-repo/ctre2024/{year}.json"
)
CATALOG_TIMEOUT_SECONDS = 5.0


def _current_year() -> int:
    return datetime.now(UTC).year


def _default_resilience() -> ResilienceConfig:
    return ResilienceConfig(
        name="catalog",
        timeout_seconds=CATALOG_TIMEOUT_SECONDS,
        ratelimit=RateLimit(max_calls=1, per_seconds=1.0),
        default_headers={"Accept": "application/json"},
    )


def catalog_url(year: int, template: str = DEFAULT_CATALOG_URL_TEMPLATE) -> str:
    """Return the URL of the catalog document published for ``year``."""

    return template.replace("{year}", str(year))


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Where the catalog lives and how it is requested."""

    url_template: str = DEFAULT_CATALOG_URL_TEMPLATE
    default_year: int = field(default_factory=_current_year)
    resilience: ResilienceConfig = field(default_factory=_default_resilience)

    def __post_init__(self) -> None:
        if "{year}" not in self.url_template:
            raise ConfigurationError(
                f"Catalog URL template must contain a {{year}} placeholder: {self.url_template}"
            )

    def url_for(self, year: int | None = None) -> str:
        return catalog_url(self.default_year if year is None else year, self.url_template)


def get_catalog_config(*, resilience: ResilienceConfig | None = None) -> CatalogConfig:
    template = optional_env_var("VENDORDEPS_CATALOG_URL_TEMPLATE") or DEFAULT_CATALOG_URL_TEMPLATE
    year = optional_int_env_var("VENDORDEPS_YEAR") or _current_year()
    timeout = optional_float_env_var("VENDORDEPS_TIMEOUT_SECONDS")

    effective = resilience or _default_resilience()
    if timeout is not None:
        effective = replace(effective, timeout_seconds=timeout)

    return CatalogConfig(url_template=template, default_year=year, resilience=effective)
