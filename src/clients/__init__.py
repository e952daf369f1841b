"""
Clients for services the transaction service depends on
"""
