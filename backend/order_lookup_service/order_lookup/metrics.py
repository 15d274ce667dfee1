# backend/order_lookup_service/order_lookup/metrics.py

from prometheus_client import Counter, Gauge, Histogram
from prometheus_client.core import CollectorRegistry

# Create a custom registry specific to this application instance
registry = CollectorRegistry()

# Basic HTTP Metrics
REQUEST_COUNT = Counter(
    'http_requests_total', 'Total HTTP requests processed by the application',
    ['app_name', 'method', 'endpoint', 'status_code'], registry=registry
)
REQUEST_DURATION = Histogram(
    'http_request_duration_seconds', 'HTTP request duration in seconds',
    ['app_name', 'method', 'endpoint', 'status_code'], registry=registry
)
REQUESTS_IN_PROGRESS = Gauge(
    'http_requests_in_progress', 'Number of HTTP requests in progress',
    ['app_name', 'method'], registry=registry
)

# Lookup outcomes: found, not_found, invalid_page
ORDER_LOOKUP_TOTAL = Counter(
    'order_lookup_total', 'Total order lookups by outcome',
    ['app_name', 'outcome'], registry=registry
)
