"""
Metrolink Router Package

Route finding over a colour-coded tram network with live delays and closures.
"""

__version__ = "1.2.0"
