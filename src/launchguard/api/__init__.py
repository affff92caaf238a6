"""HTTP API for LaunchGuard."""
