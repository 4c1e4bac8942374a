"""
HTTP routes, grouped by API version.

Each version subpackage exposes a ``router`` that ``main.create_app``
mounts under ``/api/<version>``.
"""
