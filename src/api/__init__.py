"""
HTTP routes and schemas for the transaction service
"""
