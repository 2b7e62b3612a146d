# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Prometheus metrics for the mailchimp-proxy service."""
from prometheus_client import Counter, Histogram

MAILCHIMP_REQUESTS = Counter(
    "mailchimp_api_requests_total", "Calls made to the MailChimp API", ["method", "status"]
)
MAILCHIMP_LATENCY = Histogram(
    "mailchimp_api_request_duration_seconds", "MailChimp API call latency", ["method"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10],
)
SYNC_OPERATIONS = Counter(
    "mailchimp_sync_operations_total",
    "Create/update/delete operations mirrored to MailChimp",
    ["entity", "operation", "outcome"],
)
REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request latency", ["method", "endpoint"]
)
HTTP_ERRORS = Counter(
    "http_errors_total", "Total HTTP errors", ["method", "endpoint", "status"]
)
