"""
Shared service utilities.

- http.py - requests session with retry and default timeout
"""
