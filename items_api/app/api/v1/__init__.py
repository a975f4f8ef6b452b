"""
Version 1 of the API.

The item routes keep their unversioned ``/items`` path, so this router
is mounted without a prefix.
"""
