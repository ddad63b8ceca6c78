"""hike CLI."""
