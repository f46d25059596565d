"""
Utility subpackage.

Helpers shared by the engine components: observer signals, JSON value
access, input and reply validation, and fetching host pages over HTTP.
"""
