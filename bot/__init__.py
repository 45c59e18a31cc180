"""
Bot wiring: configuration, credentials, gateway client and container.
"""
