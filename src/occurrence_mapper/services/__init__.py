"""
Shared service utilities.

- http.py - ``requests.Session`` with retry and default timeout
"""
