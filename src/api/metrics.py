from prometheus_client import Counter, Histogram, REGISTRY


# we check if they are already registered to avoid errors during hot reloads or test runs
def get_or_create_metric(name, documentation, metric_type, **kwargs):
    try:
        return metric_type(name, documentation, **kwargs)
    except ValueError:
        # Already registered, reuse it
        return REGISTRY._names_to_collectors[name]


REQUESTS_TOTAL = get_or_create_metric(
    "storymap_requests_total",
    "Total requests",
    Counter,
    labelnames=["endpoint", "status"],
)

REQUEST_LATENCY_SECONDS = get_or_create_metric(
    "storymap_request_latency_seconds",
    "Request latency",
    Histogram,
    labelnames=["endpoint"],
)

GENERATIONS_TOTAL = get_or_create_metric(
    "storymap_generations_total",
    "Story map generations by requested provider",
    Counter,
    labelnames=["provider"],
)

PROVIDER_FALLBACKS_TOTAL = get_or_create_metric(
    "storymap_provider_fallbacks_total",
    "Generations served from mock data instead of the requested provider",
    Counter,
    labelnames=["provider", "reason"],
)
