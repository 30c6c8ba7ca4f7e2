"""Legacy prototype import pipeline."""
