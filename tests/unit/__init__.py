"""
Unit tests package.

Contains unit tests for individual modules in isolation. Gateway responses
are built by hand or loaded from saved payloads; nothing touches the network.
"""
