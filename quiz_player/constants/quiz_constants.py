"""Quiz-related constants shared across UI and core layers."""

TICK_INTERVAL_SECONDS: float = 1.0
TIME_WARNING_THRESHOLD_SECONDS: int = 10
TIME_CRITICAL_THRESHOLD_SECONDS: int = 5
DEFAULT_TEMPLATE_ID: str = "mixed-bag"
