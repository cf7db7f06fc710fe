"""
Topics: the subjects articles are filed under.
"""
