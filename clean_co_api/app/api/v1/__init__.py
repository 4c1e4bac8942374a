"""
Version 1 of the Clean Co API, served under ``/api/v1``.
"""
