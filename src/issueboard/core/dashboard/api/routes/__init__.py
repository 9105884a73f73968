"""API route modules for the dashboard."""
