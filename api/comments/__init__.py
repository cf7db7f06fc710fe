"""
Comments on articles.
"""
