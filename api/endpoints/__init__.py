"""
The `GET /api` capability listing.
"""
