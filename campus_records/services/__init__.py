"""
Service layer: record operations and upload storage.
"""
