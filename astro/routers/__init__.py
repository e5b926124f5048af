"""
FastAPI routers grouped by domain (auth, astrology, numerology, dashboard).

Each module exposes an APIRouter included by the application factory. Services
are looked up on ``request.app.state`` so every app instance carries its own
database and configuration.
"""
