"""
Articles, with their aggregated comment counts.
"""
