"""
Pydantic schema definitions for API payloads.

Schemas describe request bodies and response envelopes.  Stored
documents are passed through as dictionaries so that fields unknown to
the API survive a round trip.
"""
