"""Talent directory API: profile browsing and smart search."""
