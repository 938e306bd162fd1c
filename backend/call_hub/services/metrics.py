"""Prometheus metrics instrumentation for the call hub.

Exposes metrics for monitoring connections, frame traffic and the
translation pipeline. Metrics are served over HTTP on port 8001
(configurable) when METRICS_ENABLED is set.

Metrics exported:
- hub_connected_clients: Gauge of currently connected clients
- hub_frames_received_total: Counter of inbound frames by kind
- hub_messages_broadcast_total: Counter of delivered outbound messages by type
- hub_translations_total: Counter of processed audio chunks by status
- hub_translation_latency_seconds: Histogram of external translation time

Usage:
    from call_hub.services.metrics import start_metrics_server, translations_processed

    start_metrics_server(port=8001)
    translations_processed.labels(status='success').inc()
"""

from prometheus_client import Histogram, Counter, Gauge, start_http_server
import logging

logger = logging.getLogger(__name__)

connected_clients = Gauge(
    'hub_connected_clients',
    'Number of currently connected clients'
)

frames_received = Counter(
    'hub_frames_received_total',
    'Total inbound frames',
    labelnames=['kind']  # kind: control, audio, malformed
)

messages_broadcast = Counter(
    'hub_messages_broadcast_total',
    'Total outbound messages delivered',
    labelnames=['type']
)

translations_processed = Counter(
    'hub_translations_total',
    'Total audio chunks sent to the translation service',
    labelnames=['status']  # status: success, error
)

translation_latency = Histogram(
    'hub_translation_latency_seconds',
    'Time spent waiting on the external translation service'
)


def start_metrics_server(port: int = 8001):
    """Start Prometheus metrics HTTP server."""
    try:
        start_http_server(port)
        logger.info(f"✅ Metrics server started on port {port}")
    except Exception as e:
        logger.error(f"❌ Failed to start metrics server: {e}")
