"""
Use cases for the Astro API.

Each service orchestrates repositories to implement one area (authentication,
readings, meanings, catalog metadata, dashboard). Routers call these services
instead of touching the database directly.
"""
