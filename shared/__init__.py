"""
Shared code for the multi-cloud gateway services
"""
