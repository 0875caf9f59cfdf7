"""Lanyard - attendee identity resolution and profile enrichment."""
