"""Garden climate engine."""
