"""Runtime services (telemetry) shared by the scroll core and adapters."""
