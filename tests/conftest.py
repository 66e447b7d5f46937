from __future__ import annotations

import os

from hypothesis import HealthCheck, settings


settings.register_profile("default", max_examples=200)
settings.register_profile("ci", max_examples=500, suppress_health_check=[HealthCheck.too_slow])
settings.register_profile("thorough", max_examples=5000, deadline=None)
settings.load_profile(os.environ.get("SRCLOC_HYPOTHESIS_PROFILE", "default"))
