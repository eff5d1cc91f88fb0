"""
Multi-cloud gateway services
"""
