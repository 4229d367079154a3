"""Configuration management for property-insights."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from property_insights.exceptions import ConfigurationError

BREVO_API_URL = "https://api.brevo.com/v3/smtp/email"


@dataclass
class EmailConfig:
    """Transactional email configuration."""

    provider: str = "console"  # brevo | http | console
    brevo_api_key: str | None = None
    brevo_api_url: str = BREVO_API_URL
    endpoint_url: str = "http://localhost:3000/api/send-email"
    admin_email: str = "customercare@kindred.com.au"
    from_email: str = "noreply@kindred.com.au"
    from_name: str = "Property Insights Australia"
    site_url: str = "https://www.kindred.com.au"
    timeout_seconds: float = 30.0

    @property
    def is_configured(self) -> bool:
        """Whether the Brevo provider has credentials."""
        return bool(self.brevo_api_key and self.from_email)


@dataclass
class SearchConfig:
    """Search-as-you-type configuration."""

    debounce_seconds: float = 0.3


@dataclass
class GateConfig:
    """Unlock gate configuration."""

    state_file: Path | None = None
    prompt_delay_seconds: float = 0.5


@dataclass
class AggregatorConfig:
    """Property detail aggregation configuration."""

    latency_seconds: float = 0.0
    deterministic: bool = True
    locale: str = "en_AU"


@dataclass
class BrandConfig:
    """Branding used by the report email."""

    company_name: str = "Kindred Property"
    tagline: str = "real estate, recreated"
    logo_url: str = (
        "https://kindred-property.s3.ap-southeast-2.amazonaws.com/logos/kindred-email-logo.png"
    )
    colors: dict[str, str] = field(
        default_factory=lambda: {
            "primary": "#34BF77",
            "brand_dark": "#163331",
            "soft_gray": "#F8FAF9",
            "text_main": "#163331",
            "text_muted": "#6b7280",
            "border": "#e5e7eb",
            "white": "#ffffff",
            "error": "#e53935",
        }
    )


@dataclass
class ReportConfig:
    """Report content settings."""

    brand: BrandConfig = field(default_factory=BrandConfig)
    contact_email: str = "customercare@kindred.com.au"
    contact_phone: str = "(07) 3284 0512"
    appraisal_url: str = "https://www.kindred.com.au/sales-property-appraisal"
    max_comparables: int = 10
    max_sales_history: int = 5
    max_schools: int = 5
    cta_text: str = "Get Your Free Property Appraisal"


@dataclass
class PropertyInsightsConfig:
    """Main configuration for property-insights."""

    email: EmailConfig = field(default_factory=EmailConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    gate: GateConfig = field(default_factory=GateConfig)
    aggregator: AggregatorConfig = field(default_factory=AggregatorConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "PropertyInsightsConfig":
        """Create config from environment variables."""
        import os

        email = EmailConfig(
            provider=os.getenv("EMAIL_PROVIDER", "console").lower(),
            brevo_api_key=os.getenv("BREVO_API_KEY") or None,
            endpoint_url=os.getenv("EMAIL_ENDPOINT_URL", EmailConfig.endpoint_url),
            admin_email=os.getenv("ADMIN_EMAIL", EmailConfig.admin_email),
            from_email=os.getenv("FROM_EMAIL", EmailConfig.from_email),
            from_name=os.getenv("FROM_NAME", EmailConfig.from_name),
            site_url=os.getenv("SITE_URL", EmailConfig.site_url).rstrip("/"),
        )

        search = SearchConfig(
            debounce_seconds=_millis_env("SEARCH_DEBOUNCE_MS", 300),
        )

        state_file = os.getenv("STATE_FILE")
        gate = GateConfig(
            state_file=Path(state_file) if state_file else None,
            prompt_delay_seconds=_millis_env("PROMPT_DELAY_MS", 500),
        )

        aggregator = AggregatorConfig(
            latency_seconds=_millis_env("SIMULATED_LATENCY_MS", 0),
            deterministic=os.getenv("DETERMINISTIC_SYNTHESIS", "true").lower() == "true",
        )

        return cls(
            email=email,
            search=search,
            gate=gate,
            aggregator=aggregator,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Summary safe for logging (secrets redacted)."""
        return {
            "email_provider": self.email.provider,
            "brevo_api_key": "set" if self.email.brevo_api_key else "missing",
            "site_url": self.email.site_url,
            "debounce_seconds": self.search.debounce_seconds,
            "prompt_delay_seconds": self.gate.prompt_delay_seconds,
            "state_file": str(self.gate.state_file) if self.gate.state_file else None,
            "deterministic": self.aggregator.deterministic,
        }


def _millis_env(name: str, default: int) -> float:
    """Read a millisecond env var and return seconds."""
    import os

    raw = os.getenv(name)
    if raw is None or raw == "":
        return default / 1000
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative, got {value}")
    return value / 1000
