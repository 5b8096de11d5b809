"""
HTTP routers for the records API.
"""
