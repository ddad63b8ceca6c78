"""hike CLI commands."""
