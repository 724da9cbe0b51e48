"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to route storage (CSV files) and to the
path-finding algorithm.
"""
