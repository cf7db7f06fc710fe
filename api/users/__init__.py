"""
Users (authors of articles and comments).
"""
