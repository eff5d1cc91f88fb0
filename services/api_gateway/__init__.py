"""
API gateway that path-routes requests to the provider services
"""
