# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "mnu_requests_total",
    "Total HTTP requests to the website API",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "mnu_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "mnu_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
FORM_SUBMISSIONS = Counter(
    "mnu_form_submissions_total",
    "Form submissions by form and outcome",
    ["form", "outcome"],
)
EMAIL_DELIVERIES = Counter(
    "mnu_email_deliveries_total",
    "Notification emails by provider and status",
    ["provider", "status"],
)
EMAIL_SEND_LATENCY = Histogram(
    "mnu_email_send_seconds",
    "Time spent handing a notification to the email provider",
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)
AFFILIATIONS_STORED = Gauge(
    "mnu_affiliations_stored",
    "Affiliation records currently held in memory",
)
