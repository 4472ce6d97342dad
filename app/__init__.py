"""
                Food Ordering Service

A minimal food ordering backend: in-memory menu and orders exposed
over HTTP, with a timed delivery status pipeline.

Author: Khalil_Bannouri
Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__author__ = "Khalil_Bannouri"
