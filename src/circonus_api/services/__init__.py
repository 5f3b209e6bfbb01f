"""Resource accessors over ApiClient.

- alerts_service.py (fetch by CID, fetch all, search/filter)
"""
