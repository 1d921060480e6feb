"""
FastAPI routers grouped by entity (members, classes, trainers).

Each module exposes an APIRouter that the app factory includes. Routers
only decode requests and call the services stored on ``app.state``;
service errors are turned into responses by the handler in ``app.py``.
"""
