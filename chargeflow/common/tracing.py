"""OpenTelemetry tracer used for request and orchestration spans.

Provider/exporter setup belongs to the host application; without one the API
falls back to no-op spans.
"""

from opentelemetry import trace

from chargeflow.version import __version__


tracer = trace.get_tracer("chargeflow", __version__)
