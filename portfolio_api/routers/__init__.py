"""
FastAPI routers grouped by domain (portfolio, contact, health).

Each file exposes an APIRouter that the app factory includes. Services are
looked up on ``app.state`` so tests can swap the storage behind them.
"""
