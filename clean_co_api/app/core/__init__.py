"""
Cross‑cutting infrastructure: settings, logging, access tokens and the
MongoDB connection.
"""
