"""
Package initialization for screens/students module
"""
