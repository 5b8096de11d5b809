"""
Campus Records: faculty and student record management over HTTP.
"""

__version__ = "0.1.0"
