"""FRA Atlas web service."""
