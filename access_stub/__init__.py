"""
Access stub: stand-in for the makerspace access system used by door and machine controllers
"""
