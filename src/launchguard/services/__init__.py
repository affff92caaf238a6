"""LaunchGuard services."""
