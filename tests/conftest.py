from __future__ import annotations

from hypothesis import HealthCheck, settings

# Property tests read in-memory streams; timing varies a lot on loaded CI boxes.
settings.register_profile(
    "logstats_stable",
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)

settings.load_profile("logstats_stable")
