"""Publish npm packages to a private registry."""
