"""
Service layer.

Each service wraps one MongoDB collection and is constructed per
request from the database injected by ``core.db.get_database``.  Route
handlers stay free of query details.
"""
